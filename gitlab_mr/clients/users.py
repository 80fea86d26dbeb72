"""Users resource client."""

from typing import TYPE_CHECKING

from gitlab_mr.types.users import User

if TYPE_CHECKING:
    from gitlab_mr.transport import HTTPTransport


class UsersClient:
    """Client for user lookups."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the users client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def find_by_username(self, username: str) -> list[User]:
        """
        Find users by exact username.

        Returns:
            Matching users; more than one match is possible on some instances
        """
        response = self.transport.request(
            method="GET",
            path="/users",
            params={"username": username},
        )
        return [self._parse_user(user) for user in response or []]

    def current(self) -> User:
        """
        The user the access token belongs to.

        Raises:
            AuthenticationError: If the token is missing or invalid
        """
        response = self.transport.request(method="GET", path="/user")
        return self._parse_user(response)

    def _parse_user(self, data: dict) -> User:
        return User(
            id=data["id"],
            username=data.get("username", ""),
            name=data.get("name"),
        )

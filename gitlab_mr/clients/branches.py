"""Repository branches resource client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitlab_mr.transport import HTTPTransport

# GitLab's maximum page size
PER_PAGE = 100


class BranchesClient:
    """Client for repository branch queries."""

    def __init__(self, transport: "HTTPTransport", project_path: str) -> None:
        self.transport = transport
        self.project_path = project_path

    def list_names(self) -> list[str]:
        """
        Names of all branches in the remote repository.

        Pages through the listing until a short page is returned.
        """
        names: list[str] = []
        page = 1
        while True:
            response = self.transport.request(
                method="GET",
                path=f"{self.project_path}/repository/branches",
                params={"per_page": PER_PAGE, "page": page},
            ) or []
            names.extend(branch["name"].strip() for branch in response)
            if len(response) < PER_PAGE:
                return names
            page += 1

"""Draft/ready title rule for merge requests."""

DRAFT_MARKER = "Draft: "


def is_draft_title(title: str) -> bool:
    return title.lstrip().startswith(DRAFT_MARKER)


def draft_title(title: str, draft: bool) -> str:
    """Title for a new merge request."""
    return (DRAFT_MARKER if draft else "") + title


def toggled_title(title: str, draft: bool) -> str | None:
    """
    Title an existing merge request needs to match the desired draft state.

    Args:
        title: Current title of the merge request
        draft: Whether the merge request should be a draft

    Returns:
        The new title, or None if the title already matches and no update
        should be sent
    """
    if is_draft_title(title) and not draft:
        return title.strip()[len(DRAFT_MARKER):]
    if not is_draft_title(title) and draft:
        return DRAFT_MARKER + title
    return None

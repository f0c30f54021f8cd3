CONTEXT_WIDTH = 16
CONTEXT_TRUNCATE_AT = 13
ELLIPSIS = "..."


def derive_context_string(context: str) -> str:
    """
    Normalise a logger name to a fixed 16 character label.

    Names up to 16 characters are right-padded with spaces.
    Longer names keep their first 13 characters followed by "...".
    Width is counted in characters, not rendered cells.
    """
    if len(context) <= CONTEXT_WIDTH:
        return context.ljust(CONTEXT_WIDTH, " ")
    return context[:CONTEXT_TRUNCATE_AT] + ELLIPSIS

"""Width-aware truncation of the trailing prompt message.

The prompt must never wrap the line the user types on. The trailing commit
summary is therefore cut so that the first prompt line ends exactly at a
terminal column boundary, or dropped entirely when only a useless fragment
would fit.
"""

TIMESTAMP_LEN = 10
MIN_MESSAGE_LEN = TIMESTAMP_LEN + 1


def message_budget(
    prefix_length: int,
    terminal_width: int,
    message_length: int,
    *,
    min_length: int = MIN_MESSAGE_LEN,
) -> int:
    """Compute how many characters of the trailing message may be kept.

    The budget is the space left on the visual line the prefix ends on:
    ``terminal_width - prefix_length % terminal_width``. A budget outside
    ``[min_length, terminal_width]`` becomes 0.

    Args:
        prefix_length: Visible length of everything before the message.
        terminal_width: Terminal width in columns.
        message_length: Length of the candidate message.
        min_length: Smallest budget worth showing (date plus separator).

    Returns:
        Number of leading characters to keep, in ``[0, message_length]``.
    """
    if terminal_width <= 0 or message_length <= 0:
        return 0

    remainder = max(prefix_length, 0) % terminal_width
    budget = terminal_width - remainder
    if budget < min_length or budget > terminal_width:
        return 0
    return min(budget, message_length)


def truncate_message(
    prefix_length: int,
    terminal_width: int,
    message: str,
    *,
    min_length: int = MIN_MESSAGE_LEN,
) -> str:
    """Keep the leading part of message that fits after the prefix.

    Example:
        >>> truncate_message(69, 80, " 2024-03-01 Fix the parser")
        ' 2024-03-01'
        >>> truncate_message(75, 80, " 2024-03-01 Fix the parser")
        ''
    """
    budget = message_budget(
        prefix_length, terminal_width, len(message), min_length=min_length
    )
    return message[:budget]

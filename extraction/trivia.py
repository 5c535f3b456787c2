"""
Leading comment association for declaration members.
"""

from extraction.syntax_tree import MemberNode


def leading_comment(member: MemberNode, source: bytes) -> str:
    """Return the comments in a member's leading trivia.

    The leading trivia is the whitespace/comment span between the previous
    sibling token (previous member, separator or opening brace) and the
    member's first token. A declaration's own header comment sits before the
    opening brace and is therefore never attributed to its first member.

    Args:
        member: The member node.
        source: The raw source bytes of the file.

    Returns:
        Comment texts joined by newlines and trimmed, or "" if the trivia
        holds no comments.
    """
    if not member.comments:
        return ""
    return "\n".join(span.text(source) for span in member.comments).strip()

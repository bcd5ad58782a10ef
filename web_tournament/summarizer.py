"""Focus-aware paragraph selection under a character budget."""


def focus_terms(focus: str) -> list[str]:
    return focus.lower().split()


def focused_summary(text: str, focus: str, max_length: int = 2000) -> str:
    """Select paragraphs of `text` relevant to `focus`, bounded by `max_length`.

    Paragraphs are newline-separated. A paragraph is kept when it contains any
    focus term (case-insensitive substring), and the first paragraph is kept
    regardless, so non-empty text never yields an empty summary. Accumulation
    stops once the kept total exceeds `max_length`; the joined result is then
    cut to exactly `max_length` characters.
    """
    terms = focus_terms(focus)
    paragraphs = [p for p in text.split("\n") if p]

    relevant: list[str] = []
    total_length = 0

    for paragraph in paragraphs:
        lower = paragraph.lower()
        is_relevant = any(term in lower for term in terms)

        if is_relevant or not relevant:
            relevant.append(paragraph)
            total_length += len(paragraph)

            if total_length > max_length:
                break

    combined = "\n\n".join(relevant)
    return combined[:max_length]

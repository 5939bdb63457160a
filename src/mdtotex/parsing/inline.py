from typing import List, Optional, Tuple

from mdtotex.parsing.patterns import PatternTable, RegexPattern, default_patterns

Substitution = Tuple[RegexPattern, str]


class InlineTransformer:
    """
    Converts a span of plain text (no block markers) to LaTeX.

    The substitutions run in a fixed order and each one sees the output of
    the previous one:

    1. ``&`` is escaped
    2. ``<!-- comments -->`` are removed
    3. ``^sup^`` -> ``\\textsuperscript``
    4. ``*bold*`` -> ``\\textbf``
    5. ```mono``` -> ``\\texttt``
    6. 'quote' -> TeX single quotes
    7. "quote" -> TeX double quotes
    8. ``_emph_`` -> ``\\emph``
    9. ``[text](target)`` -> ``text \\url{target}``
    10. ``[^mark]`` -> ``\\footnotemark[mark]``
    """

    def __init__(self, patterns: Optional[PatternTable] = None) -> None:
        self.patterns: PatternTable = patterns or default_patterns()
        self.substitutions: List[Substitution] = [
            (self.patterns.comment, ""),
            (self.patterns.superscript, r"\\textsuperscript{\g<super>}"),
            (self.patterns.bold, r"\\textbf{\g<bold>}"),
            (self.patterns.mono, r"\\texttt{\g<mono>}"),
            (self.patterns.single_quote, r"`\g<quote>'"),
            (self.patterns.double_quote, r"``\g<quote>''"),
            (self.patterns.emph, r"\\emph{\g<emph>}"),
            (self.patterns.link, r"\g<text> \\url{\g<link>}"),
            (self.patterns.footnote_ref, r"\\footnotemark[\g<mark>]"),
        ]

    def transform(self, text: str) -> str:
        processed_text: str = text.replace("&", "\\&")
        for pattern, replacement in self.substitutions:
            processed_text = pattern.sub(replacement, processed_text)
        return processed_text

    __call__ = transform

from typing import Iterable, List, Optional

from mdtotex.parsing.converter import Converter


def fragments(lines: Iterable[str], converter: Optional[Converter] = None) -> List[str]:
    return list((converter or Converter()).convert(lines))


def render(lines: Iterable[str], converter: Optional[Converter] = None) -> str:
    return "".join(fragments(lines, converter))

import logging


def get_logger(name: str) -> logging.Logger:
    """
    Returns a standard library logger namespaced under "mdtotex.".
    """
    if not (name == "mdtotex" or name.startswith("mdtotex.")):
        name = f"mdtotex.{name}"
    return logging.getLogger(name)

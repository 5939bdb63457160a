from pydantic import BaseModel, Field


class ConverterConfig(BaseModel):
    """
    Knobs for a single conversion run.
    """
    # Hard cap on open list environments of one kind
    max_nesting: int = Field(4, ge=1)
    # Largest leading-whitespace count accepted on a list item
    max_indent: int = Field(255, ge=0)
    # Emit the raw text of a line that failed to convert instead of dropping it
    passthrough_errors: bool = False

    model_config = {"frozen": True}

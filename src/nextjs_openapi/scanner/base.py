"""Raw route source units produced by the discoverer."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class RouteUnit(BaseModel):
    """One route handler file, read in full."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    file_type: Literal["js", "ts", "jsx", "tsx"]
    content: str

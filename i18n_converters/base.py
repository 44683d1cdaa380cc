from pathlib import Path
from typing import Literal, TypedDict

from pydantic import BaseModel, Field

TABLE_FILENAME = "uiMessages.csv"
RESOURCE_FILENAME = "uiMessages_{language}.properties"

TO_TABLE = "to_table"
TO_RESOURCES = "to_resources"
Direction = Literal["to_table", "to_resources"]


class ConversionConfig(BaseModel):
    input_path: Path = Field(description="Directory of resource files or a single table file")
    output_dir: Path = Field(default_factory=Path.cwd, description="Where the generated files go")
    recursion_limit: int = Field(default=5, gt=0)


class ConversionState(TypedDict, total=False):
    input_path: Path
    output_dir: Path
    direction: Direction
    languages: list[str]
    written: list[str]


def resource_filename(language: str) -> str:
    return RESOURCE_FILENAME.format(language=language)

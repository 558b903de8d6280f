"""
Generator configuration.
"""

from dataclasses import dataclass
from pathlib import Path

from .types import Kind

DEFAULT_OUTPUT_ROOT = Path("src/main/java")
DEFAULT_BASE_PACKAGE = "com.github.zhitron"
CONSTANTS_CLASS = "BasicConstant"


@dataclass
class GeneratorConfig:
    """Where and how generated sources are written."""
    output_root: Path = DEFAULT_OUTPUT_ROOT
    base_package: str = DEFAULT_BASE_PACKAGE
    encoding: str = "utf-8"
    author: str = "zhitron"

    def __post_init__(self):
        self.output_root = Path(self.output_root)

    @property
    def lambda_package(self) -> str:
        return f"{self.base_package}.lambda"

    @property
    def constants_class(self) -> str:
        """Fully qualified name of the shared zero-value constants interface."""
        return f"{self.base_package}.{CONSTANTS_CLASS}"

    def kind_package(self, kind: Kind) -> str:
        return f"{self.lambda_package}.{kind.directory}"

    @property
    def package_dir(self) -> Path:
        return self.output_root.joinpath(*self.base_package.split("."))

    def kind_directory(self, kind: Kind) -> Path:
        return self.package_dir / "lambda" / kind.directory

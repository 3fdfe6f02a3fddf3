from functools import reduce
from os import pathsep
from pathlib import Path
from typing import Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError
from yaml import YAMLError

from .. import app_name
from ..exceptions import ConfigurationError
from ..models import CompileOptions, OutputStyle
from ..utils import load_all_yamls, split_path_list

config_file_name = f"{app_name}.yml"
_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    output_style: OutputStyle = OutputStyle.Nested
    source_comments: bool = False
    include_paths: tuple[str, ...] = ()
    image_path: str = "images"
    chunk_size: PositiveInt = 512
    precision: PositiveInt = 5
    config_files: tuple[Path, ...] = Field(default=(), exclude=True)

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load the settings from the `sassz.yml` files that apply to `path`.

        The user configuration directory is read first, then `path` itself, so that \
        values set next to the stylesheets win.

        Args:
            path: Directory in which to look for a local configuration file.

        Raises:
            ConfigurationError: Raised if a configuration file cannot be parsed or \
                does not validate.

        Returns:
            The merged settings.
        """
        config_files = tuple(
            config_file
            for directory in dict.fromkeys([_user_config_dir, path.resolve()])
            if (config_file := directory / config_file_name).is_file()
        )
        try:
            content: dict[str, Any] = reduce(
                lambda a, b: {**a, **(b or {})}, load_all_yamls(config_files), {}
            )
            return cls.model_validate({**content, "config_files": config_files})
        except (YAMLError, ValidationError, TypeError) as e:
            msg = f"invalid configuration in {', '.join(map(str, config_files))}: {e}"
            raise ConfigurationError(msg) from e

    def compile_options(
        self,
        output_style: OutputStyle | None = None,
        source_comments: bool = False,
        include_paths: tuple[str, ...] = (),
    ) -> CompileOptions:
        extra_include_paths = [
            include_path
            for value in include_paths
            for include_path in split_path_list(value, pathsep)
        ]
        return CompileOptions(
            output_style=output_style or self.output_style,
            source_comments=source_comments or self.source_comments,
            include_paths=(*extra_include_paths, *self.include_paths),
            image_path=self.image_path,
        )

"""Command-line parameter type for complex option values.

Lets a typer/click option accept either inline JSON/YAML or an @file
reference:

    @app.command()
    def run(
        payload: Any = typer.Option(..., click_type=RawDataParamType()),
    ) -> None: ...

    $ tool run --payload '{"a": 1}'
    $ tool run --payload @payload.yaml
"""

from __future__ import annotations

from typing import Any

import click

from rawdata.config import ReaderConfig
from rawdata.decode import decode_as, decode_generic
from rawdata.errors import RawDataError


class RawDataParamType(click.ParamType):
    """Click parameter type that decodes JSON/YAML values.

    Attributes:
        model: Optional type to bind into (e.g. a pydantic model or
            list[Model]). Without it the option yields an ObjectValue or
            ArrayValue.
        config: Reader options passed to the decoder.
    """

    name = "json|yaml|@file"

    def __init__(self, model: Any = None, config: ReaderConfig | None = None) -> None:
        self.model = model
        self.config = config

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Any:
        # Defaults and repeated conversion may pass already decoded values
        if not isinstance(value, str):
            return value

        try:
            if self.model is not None:
                return decode_as(value, self.model, self.config)
            return decode_generic(value, self.config)
        except RawDataError as e:
            self.fail(str(e), param, ctx)

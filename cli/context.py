"""
Shared command state carried on the typer context.
"""

import typer

from modtool.config import ToolConfig


def set_config(ctx: typer.Context, config: ToolConfig) -> None:
    ctx.obj = config


def get_config(ctx: typer.Context) -> ToolConfig:
    """Config loaded by the app callback, or defaults when run standalone."""
    root = ctx.find_root()
    if isinstance(root.obj, ToolConfig):
        return root.obj
    return ToolConfig()

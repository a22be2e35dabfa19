from __future__ import annotations

import importlib.util
import itertools
import pathlib
import sys
import traceback
from collections.abc import Iterable
from types import ModuleType
from typing import Callable

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from svgpath._config import get_unit_settings, normalize_units, unit_settings_for
from svgpath.path import Path

console = Console()
app = typer.Typer(help="Emit SVG path data from the command line or from Python modules.")

MODEL_MODULE = "svgpath_user_model"


class ModelBuildError(RuntimeError):
    """Raised when a model module cannot provide usable paths."""


def _path_element(path: Path) -> str:
    return f'<path d="{path}"></path>'


def _render_lines(paths: Iterable[Path], tag: bool) -> list[str]:
    return [_path_element(p) if tag else str(p) for p in paths]


def _print_data(lines: Iterable[str]) -> None:
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def _import_model(model_path: pathlib.Path) -> ModuleType:
    """Execute ``model_path`` as a fresh module, replacing any earlier model."""

    sys.modules.pop(MODEL_MODULE, None)
    spec = importlib.util.spec_from_file_location(MODEL_MODULE, model_path)
    if spec is None or spec.loader is None:
        raise ModelBuildError(f"{model_path} is not an importable Python module.")

    module = importlib.util.module_from_spec(spec)
    # dataclasses in the model look their module up by name
    sys.modules[MODEL_MODULE] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(MODEL_MODULE, None)
        raise
    return module


def _coerce_paths(result: object, model_path: pathlib.Path) -> list[Path]:
    if isinstance(result, Path):
        return [result]
    if isinstance(result, Iterable) and not isinstance(result, (str, bytes)):
        paths = list(result)
        if all(isinstance(p, Path) for p in paths):
            return paths
    raise ModelBuildError(f"{model_path} build() must return a Path or an iterable of Paths.")


def _paths_factory_from_module(model_path: pathlib.Path) -> Callable[[], list[Path]]:
    def factory() -> list[Path]:
        module = _import_model(model_path)
        builder = getattr(module, "build", None)
        if builder is None or not callable(builder):
            raise ModelBuildError(f"{model_path} must define a callable build() function.")
        return _coerce_paths(builder(), model_path)

    return factory


def _unclaimed_output(output: pathlib.Path) -> pathlib.Path:
    """First of ``output``, ``stem (1).suffix``, ``stem (2).suffix``, ... that does not exist."""

    candidates = itertools.chain(
        [output],
        (output.with_name(f"{output.stem} ({n}){output.suffix}") for n in itertools.count(1)),
    )
    return next(c for c in candidates if not c.exists())


@app.command()
def circle(
    center_x: float = typer.Argument(..., help="Circle center x."),
    center_y: float = typer.Argument(..., help="Circle center y."),
    radius: float = typer.Argument(..., help="Circle radius."),
    start_angle: float = typer.Argument(..., help="Angle where the arc begins."),
    arc_angle: float = typer.Argument(..., help="Signed angle the arc spans; negative sweeps clockwise."),
    units_name: str | None = typer.Option(
        None,
        "--units",
        "-u",
        help="Angle units: radians, degrees or turns. Defaults to angle_units from ~/.svgpath/svgpath.cfg.",
    ),
    tag: bool = typer.Option(False, "--tag", help="Wrap the data in a <path> element."),
) -> None:
    """
    Print the path data for a circular arc. Only the data is written to stdout.
    """

    if units_name is None:
        units = get_unit_settings()
    else:
        normalized = normalize_units(units_name)
        if normalized is None:
            raise typer.BadParameter(f"Unknown angle units {units_name!r}.")
        units = unit_settings_for(normalized)

    path = Path.partial_circle(
        center_x,
        center_y,
        radius,
        units.to_radians(start_angle),
        units.to_radians(arc_angle),
    )
    _print_data(_render_lines([path], tag))


@app.command()
def render(
    model: pathlib.Path = typer.Argument(..., help="Path to a Python module that defines build()."),
    output: pathlib.Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional file that receives one path per line.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing output file."),
    tag: bool = typer.Option(False, "--tag", help="Wrap each path in a <path> element."),
) -> None:
    """
    Load a model module, call its build() function, and print the resulting path data.
    """

    if not model.exists():
        raise typer.BadParameter(f"Model path {model} does not exist.")

    factory = _paths_factory_from_module(model)
    try:
        paths = factory()
    except ModelBuildError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except Exception as exc:
        report = Text("".join(traceback.format_exception(exc)))
        console.print(Panel.fit(report, title="Model build failed", style="red"))
        raise typer.Exit(code=1) from exc

    lines = _render_lines(paths, tag)
    if output is None:
        _print_data(lines)
        return

    final_output = output if overwrite else _unclaimed_output(output)
    if final_output != output:
        console.print(
            f"[yellow]Output {escape(str(output))} exists; writing to {escape(str(final_output))} instead.[/yellow]"
        )

    try:
        final_output.parent.mkdir(parents=True, exist_ok=True)
        final_output.write_text("".join(f"{line}\n" for line in lines))
    except OSError as exc:
        raise typer.BadParameter(f"Failed to write {final_output}: {exc}") from exc

    console.print(
        Panel(
            f"Wrote {len(lines)} path(s) to [green]{escape(str(final_output))}[/green].",
            title="Render complete",
            border_style="green",
        )
    )

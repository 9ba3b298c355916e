from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import typer
import yaml

from .config import EngineConfig, load_config
from .engine import TextProcessor
from .models import AnalysisResult, CollaborationConflict, Document, conflict_from_dict

app = typer.Typer(help="Prose metrics CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging on stderr."
    ),
) -> None:
    """Readability metrics, writing suggestions and edit-conflict resolution."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Analyze a text file or directory of text files and emit a JSON summary."""
    processor = _build_processor(config)
    documents = _load_documents(input_path)
    results = processor.analyze_corpus(documents)
    typer.echo(json.dumps({"documents": _build_summary(results)}, indent=2))


@app.command()
def optimize(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Emit writing suggestions for a single text file as JSON."""
    processor = _build_processor(config)
    text = _read_text(input_path)
    suggestions = processor.optimize_text(text)
    typer.echo(
        json.dumps({"suggestions": [s.to_dict() for s in suggestions]}, indent=2)
    )


@app.command()
def resolve(
    conflicts: Path = typer.Option(
        ...,
        "--conflicts",
        exists=True,
        readable=True,
        dir_okay=False,
        help="JSON file holding a list of conflict descriptors.",
    ),
) -> None:
    """Propose resolutions for a JSON list of edit conflicts."""
    processor = TextProcessor()
    resolved = processor.resolve_conflicts(_load_conflicts(conflicts))
    typer.echo(json.dumps([c.to_dict() for c in resolved], indent=2))


@app.command("hash")
def content_hash(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
) -> None:
    """Print the content hash of a text file."""
    text = _read_text(input_path)
    typer.echo(TextProcessor().generate_content_hash(text))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EngineConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _build_processor(config_path: Path | None) -> TextProcessor:
    """Load the config and compile it, surfacing bad input as a usage error."""
    try:
        return TextProcessor(load_config(config_path))
    except (ValueError, yaml.YAMLError) as exc:
        # PatternCompileError is a ValueError as well.
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _read_text(path: Path) -> str:
    """Read a file as UTF-8 with line endings left exactly as stored."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        text = _read_text(input_path)
        return [Document(doc_id=input_path.name, text=text)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        Document(
            doc_id=str(file.relative_to(input_path)),
            text=_read_text(file),
        )
        for file in files
    ]


def _load_conflicts(path: Path) -> List[CollaborationConflict]:
    """Decode a JSON list of conflict objects."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint="--conflicts") from exc
    if not isinstance(payload, list):
        raise typer.BadParameter(
            "Conflicts file must contain a JSON list.", param_hint="--conflicts"
        )
    try:
        return [conflict_from_dict(item) for item in payload]
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--conflicts") from exc


def _build_summary(results: Dict[str, AnalysisResult]) -> List[Dict[str, Any]]:
    """Create a JSON-serializable summary for each analyzed document."""
    summary: List[Dict[str, Any]] = []
    for doc_id, result in sorted(results.items()):
        summary.append({"doc_id": doc_id, **result.to_dict()})
    return summary


if __name__ == "__main__":
    main()

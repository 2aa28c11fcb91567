import json
from pathlib import Path
from warnings import warn

import click

from .const import ERRORS, ErrorKind
from .logic import is_possible_symlink, parse

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}


def check_path(path: Path, size_check: bool = True) -> dict:
    """Pre-check, read and parse one file. Never raises for I/O errors."""
    try:
        if size_check and not is_possible_symlink(path.stat()):
            return {"path": str(path), "status": "SKIP", "target": None, "errors": []}
        content = path.read_bytes()
    except OSError as e:
        return {"path": str(path), "status": "FAIL", "target": None,
                "errors": [{"code": "E_READ", "message": ERRORS["E_READ"], "detail": str(e)}]}

    target, err = parse(content)
    if err is not None:
        if err is ErrorKind.MD5_MISMATCH:
            warn(f"{path}: {err.message}")
        return {"path": str(path), "status": "FAIL", "target": None,
                "errors": [{"code": err.code, "message": err.message}]}
    return {"path": str(path), "status": "PASS", "target": target, "errors": []}


@click.group()
def main():
    pass

@main.command("check")
@click.argument("paths", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--no-size-check", is_flag=True, help="Parse files regardless of their size")
def check_cmd(paths: tuple[Path, ...], no_size_check: bool):
    failed = False
    for path in paths:
        result = check_path(path, size_check=not no_size_check)
        failed = failed or result["status"] == "FAIL"
        click.echo(json.dumps(result, **CANONICAL_JSON_KW))
    if failed:
        raise SystemExit(1)

@main.command("parse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse_cmd(path: Path):
    # Fail closed, with a single-line reason.
    try:
        content = path.read_bytes()
    except OSError as e:
        click.echo(f"FATAL: {ERRORS['E_READ']}: {e}")
        raise SystemExit(1)
    target, err = parse(content)
    if err is not None:
        if err is ErrorKind.MD5_MISMATCH:
            warn(f"{path}: {err.message}")
        click.echo(f"FATAL: {err.message}")
        raise SystemExit(1)
    click.echo(target)

if __name__ == "__main__":
    main()

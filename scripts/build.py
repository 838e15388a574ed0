#!/usr/bin/env python3
"""
Build script for the Lambda deployment package.

Every function ships the same archive: the ``crud_service`` package plus its
runtime dependencies. Functions differ only in the handler they point at.
"""
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

PACKAGE_NAME = "crud_service"

# Lambda function name -> handler setting
FUNCTIONS = {
    "api": "crud_service.handlers.api_handler.lambda_handler",
    "orders-queue": "crud_service.handlers.queue_handler.lambda_handler",
    "scheduled-task": "crud_service.handlers.timer_handler.scheduled_task_handler",
    "daily-task": "crud_service.handlers.timer_handler.daily_task_handler",
}


def stage_sources(src_dir: Path, staging_dir: Path) -> Path:
    """Copy the package into ``staging_dir``, leaving caches behind."""
    target = staging_dir / PACKAGE_NAME
    shutil.copytree(
        src_dir / PACKAGE_NAME,
        target,
        ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
        dirs_exist_ok=True,
    )
    return target


def install_dependencies(project_root: Path, staging_dir: Path) -> None:
    """Install the runtime dependencies declared in pyproject.toml."""
    subprocess.run([
        sys.executable, "-m", "pip", "install",
        str(project_root),
        "-t", str(staging_dir),
        "--platform", "manylinux2014_x86_64",
        "--only-binary=:all:",
        "--upgrade",
    ], check=True)


def write_archive(staging_dir: Path, zip_path: Path) -> int:
    """Zip ``staging_dir`` into ``zip_path`` and return the archive size."""
    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, _, files in os.walk(staging_dir):
            for file in sorted(files):
                file_path = Path(root) / file
                zipf.write(file_path, file_path.relative_to(staging_dir))
    return zip_path.stat().st_size


def main(with_dependencies: bool = True):
    """Main build function"""
    project_root = Path(__file__).parent.parent
    build_dir = project_root / "build"
    build_dir.mkdir(exist_ok=True)

    staging_dir = build_dir / f"temp_{PACKAGE_NAME}"
    if staging_dir.exists():
        shutil.rmtree(staging_dir)
    staging_dir.mkdir()

    print(f"Staging {PACKAGE_NAME}...")
    stage_sources(project_root / "src", staging_dir)

    if with_dependencies:
        print("Installing dependencies...")
        install_dependencies(project_root, staging_dir)

    zip_path = build_dir / f"{PACKAGE_NAME}.zip"
    size = write_archive(staging_dir, zip_path)
    shutil.rmtree(staging_dir)

    print(f"{zip_path.name} created ({size} bytes)")
    for function_name, handler in FUNCTIONS.items():
        print(f"  {function_name}: {handler}")

    print("Build complete!")


if __name__ == "__main__":
    main(with_dependencies="--no-deps" not in sys.argv[1:])

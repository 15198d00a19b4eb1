"""
CLI 入口模块 - 使用 Typer 构建命令行界面

元数据生成流程：
1. 构建全部示例
2. 发现示例目录
3. 逐个提取并聚合
4. 写入 metadata.json
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from examples_metadata.config import load_config
from examples_metadata.core import aggregate, discover_examples, run_build
from examples_metadata.errors import MetadataError
from examples_metadata.reporters import write_document

# 创建 Typer 应用实例
app = typer.Typer(
    name="examples-metadata",
    help="Build every example extension and write the aggregated metadata.json.",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Build every example extension and write the aggregated metadata.json."""
    if ctx.invoked_subcommand is None:
        run_update()


@app.command()
def update(
    root: str = typer.Argument(
        ".",
        help="Project root containing the examples directory",
    ),
    examples_dir: Optional[str] = typer.Option(
        None,
        "--examples-dir",
        help="Examples directory, relative to the root",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file, relative to the root",
    ),
    build_command: Optional[str] = typer.Option(
        None,
        "--build-command",
        help="Command that builds every example",
    ),
    repo_url: Optional[str] = typer.Option(
        None,
        "--repo-url",
        help="URL prefix used for each example's link",
    ),
    skip_build: bool = typer.Option(
        False,
        "--skip-build",
        help="Use existing build output instead of building",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
) -> None:
    """
    Regenerate metadata.json from the examples directory.

    Examples:
        examples-metadata
        examples-metadata update ./examples-repo --skip-build
        examples-metadata update -o docs/metadata.json
    """
    run_update(
        root,
        examples_dir=examples_dir,
        output=output,
        build_command=build_command,
        repo_url=repo_url,
        skip_build=skip_build,
        verbose=verbose,
    )


def run_update(
    root: str = ".",
    examples_dir: Optional[str] = None,
    output: Optional[str] = None,
    build_command: Optional[str] = None,
    repo_url: Optional[str] = None,
    skip_build: bool = False,
    verbose: bool = False,
) -> None:
    """执行完整流程，失败时以退出码 1 结束"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    root_path = Path(root).resolve()
    if not root_path.is_dir():
        console.print(f"[red]Error:[/red] Path is not a directory: {root}")
        raise typer.Exit(1)

    try:
        config = load_config(root_path).with_overrides(
            examples_dir=examples_dir,
            output=output,
            build_command=build_command,
            repo_url=repo_url,
            skip_build=skip_build or None,
        )

        if config.skip_build:
            console.print("[dim]Skipping build[/dim]")
        else:
            console.print("[blue]ℹ[/blue] Building all extensions...")
            run_build(config)

        if not config.examples_path.is_dir():
            console.print(f"[red]Error:[/red] Examples directory not found: {config.examples_path}")
            raise typer.Exit(1)

        console.print("[blue]ℹ[/blue] Processing examples...")

        def on_example(example_dir: Path) -> None:
            console.print(f"  - `{escape(_relative(example_dir, config.root))}`")

        def on_skip(example_dir: Path, missing: Path) -> None:
            console.print(f"[yellow]⚠ Skipped, not found:[/yellow] {escape(_relative(missing, config.root))}")

        document = aggregate(
            discover_examples(config.examples_path),
            config,
            on_example=on_example,
            on_skip=on_skip,
        )

        console.print(
            f"[blue]ℹ[/blue] Writing {len(document.examples)} examples to "
            f"`{escape(_relative(config.output_path, config.root))}`..."
        )
        write_document(document, config.output_path)
    except MetadataError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print("[green]✔[/green] Done!")


@app.command()
def version() -> None:
    """Show the version of examples-metadata."""
    from examples_metadata import __version__
    console.print(f"[bold]examples-metadata[/bold] v{__version__}")


if __name__ == "__main__":
    app()

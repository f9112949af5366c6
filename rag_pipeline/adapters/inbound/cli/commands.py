"""CLI interface for the knowledge RAG service."""

import json
import os
import uuid
from pathlib import Path

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ....composition.container import ServiceContainer, build_container
from ....config.logging import setup_logging
from ....config.settings import Settings
from ....core.domain import AgentPreset
from ...common.exception_handler import format_exception_json

app = typer.Typer(
    name="ragpipe",
    help="Ask questions over your own documents with retrieval-augmented generation",
    add_completion=False,
)

console = Console(force_terminal=True, legacy_windows=False)

# Shows full JSON error details
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"

DOC_OPTION = typer.Option(
    None,
    "--doc",
    "-d",
    exists=True,
    dir_okay=False,
    readable=True,
    help="Text file to ingest before running (repeatable)",
)


def handle_cli_error(exc: Exception) -> None:
    """Display an error in structured form.

    In debug mode the full JSON is shown; otherwise a short message with the
    error code and raise location.
    """
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error = error_data["error"]
    console.print(f"\n[red]Error [{error.get('code', 'UNKNOWN')}]:[/] {error['message']}")
    console.print(f"[dim]Type: {error['type']}[/]")

    location = error_data.get("location", {})
    if location:
        loc_str = f"{location.get('file', '?')}:{location.get('line', '?')} in {location.get('method', '?')}"
        console.print(f"[dim]Location: {loc_str}[/]")

    console.print("[dim]Set DEBUG=true for full details[/]")


def get_container(docs: list[Path] | None = None) -> ServiceContainer:
    """Build the services and ingest any ``--doc`` files.

    The index lives only for this process, so documents are loaded on every
    invocation.
    """
    settings = Settings()
    setup_logging(settings.log_level, json_format=settings.log_json)
    container = build_container(settings)

    if container.demo_mode:
        console.print("[yellow]Google API key not configured: serving demo responses.[/]")

    for path in docs or []:
        with console.status(f"[bold green]Indexing {path.name}...[/]"):
            document = container.rag.add_text_file(path.read_text(encoding="utf-8"), path.name)
        console.print(f"[dim]Indexed {path.name} as {document.doc_id}[/]")

    return container


def _load(docs: list[Path] | None) -> ServiceContainer:
    try:
        return get_container(docs)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)


def _print_sources(results) -> None:
    if not results:
        return
    console.print("\n[dim]Sources:[/]")
    for result in results[:3]:
        meta = result.metadata
        label = meta.get("title") or meta.get("filename") or meta.get("doc_id", "unknown")
        console.print(f"  [dim]{label} (score {result.score:.3f})[/]")


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to answer"),
    docs: list[Path] = DOC_OPTION,
    no_retrieval: bool = typer.Option(False, "--no-retrieval", help="Answer without the index"),
) -> None:
    """Ask a single question and get an answer."""
    container = _load(docs)

    try:
        with console.status("[bold green]Thinking...[/]"):
            answer = container.rag.generate_answer(question, use_retrieval=not no_retrieval)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(Markdown(answer))


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    docs: list[Path] = DOC_OPTION,
    k: int = typer.Option(5, "--k", "-k", min=1, help="Number of results"),
) -> None:
    """Show the chunks most similar to a query."""
    container = _load(docs)

    try:
        results = container.rag.search(query, k)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    table = Table(title=f"Top {len(results)} results")
    table.add_column("#", style="dim")
    table.add_column("Score")
    table.add_column("Source")
    table.add_column("Excerpt")
    for rank, result in enumerate(results, start=1):
        meta = result.metadata
        table.add_row(
            str(rank),
            f"{result.score:.3f}",
            str(meta.get("title") or meta.get("filename") or meta.get("doc_id", "")),
            result.content[:120].replace("\n", " "),
        )
    console.print(table)


@app.command()
def chat(docs: list[Path] = DOC_OPTION) -> None:
    """Start an interactive conversation over the indexed documents."""
    console.print(
        Panel.fit(
            "[bold]Knowledge RAG[/]\n"
            "[dim]Each answer uses your last few questions as context.[/]\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Conversational RAG",
            border_style="blue",
        )
    )
    container = _load(docs)
    session_id = uuid.uuid4().hex

    while True:
        try:
            question = Prompt.ask("\n[bold cyan]You[/]")

            if question.lower() in ("quit", "exit", "q"):
                console.print("[dim]Goodbye![/]")
                break

            if not question.strip():
                continue

            with console.status("[bold green]Thinking...[/]"):
                result = container.rag.conversational_rag(question, session_id=session_id)

            console.print()
            console.print(Panel(Markdown(result.answer), title="[bold blue]Assistant[/]", border_style="blue"))
            _print_sources(result.sources)

        except KeyboardInterrupt:
            console.print("\n[dim]Goodbye![/]")
            break
        except Exception as exc:
            handle_cli_error(exc)


@app.command()
def summarize(
    docs: list[Path] = DOC_OPTION,
    query: str | None = typer.Option(None, "--query", "-q", help="Focus the summary on a topic"),
) -> None:
    """Summarise the indexed documents."""
    container = _load(docs)

    try:
        with console.status("[bold green]Summarising...[/]"):
            summary = container.rag.summarize(query)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    console.print(Markdown(summary))


@app.command()
def agent(
    preset: AgentPreset = typer.Option(AgentPreset.GENERAL, "--preset", "-p", help="Agent persona"),
) -> None:
    """Chat with an agent preset."""
    container = _load(None)
    session_id = uuid.uuid4().hex
    label = container.agents.profile(preset).ai_label

    console.print(f"[bold]{label}[/] [dim](type 'quit' to leave, 'memory' to show history)[/]")

    while True:
        try:
            message = Prompt.ask("\n[bold cyan]You[/]")

            if message.lower() in ("quit", "exit", "q"):
                break
            if message.lower() == "memory":
                console.print(container.agents.memory(session_id, preset) or "[dim](empty)[/]")
                continue
            if not message.strip():
                continue

            with console.status("[bold green]Thinking...[/]"):
                reply = container.agents.chat(message, session_id, preset=preset)
            console.print(Panel(Markdown(reply), title=f"[bold magenta]{label}[/]", border_style="magenta"))

        except KeyboardInterrupt:
            break
        except Exception as exc:
            handle_cli_error(exc)


@app.command()
def status(docs: list[Path] = DOC_OPTION) -> None:
    """Show configuration and knowledge index status."""
    container = _load(docs)
    settings = container.settings

    console.print("[bold]Knowledge RAG Status[/]\n")

    if settings.has_llm_credentials:
        console.print("✅ Google API key configured")
    else:
        console.print("❌ Google API key not set (set GOOGLE_API_KEY in .env)")

    console.print(f"Model: {settings.llm_model}")
    console.print(f"Embeddings: {settings.embedding_backend}")
    console.print(f"Chunking: {settings.chunk_size} chars, {settings.chunk_overlap} overlap")

    stats = container.rag.get_stats()
    table = Table(title="Knowledge index")
    table.add_column("Metric")
    table.add_column("Value")
    table.add_row("Chunks", str(stats.chunk_count))
    table.add_row("Source documents", str(stats.source_document_count))
    table.add_row("Store created", "yes" if stats.has_store else "no")
    table.add_row("Demo mode", "yes" if stats.demo_mode else "no")
    console.print(table)


if __name__ == "__main__":
    app()

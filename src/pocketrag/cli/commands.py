"""CLI commands for the pre-computed vector RAG"""

import os
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

# Load environment variables
load_dotenv()

from ..data import DOCUMENTS, DEMO_QUERIES, DEMO_QUESTIONS
from ..embeddings import EmbeddingGenerator, VectorStore
from ..errors import RAGError, LoadError
from ..processing import VectorPreprocessor
from ..prompts import load_system_prompt
from ..query import RAGPipeline, ResponseSynthesizer
from ..storage import read_corpus, corpus_dimension

console = Console()

DEFAULT_CORPUS = "./precomputed_vectors.json"


def default_corpus_path() -> str:
    return os.getenv("RAG_CORPUS_PATH", DEFAULT_CORPUS)


def fail(ctx, message: str, error: Exception):
    """Report an error and exit non-zero. Call from inside an except block."""
    console.print(f"[red]✗ {message}: {escape(str(error))}[/red]")
    if ctx.obj.get('debug'):
        console.print_exception()
    ctx.exit(1)


def get_embedding_generator(ctx):
    """Lazy-load the embedding generator"""
    if ctx.obj['embedding_generator'] is None:
        ctx.obj['embedding_generator'] = EmbeddingGenerator()
    return ctx.obj['embedding_generator']


def get_vector_store(ctx, corpus: str) -> VectorStore:
    """Lazy-load the vector store and its corpus"""
    if ctx.obj['vector_store'] is None:
        store = VectorStore(embedding_generator=get_embedding_generator(ctx))
        store.load(corpus)
        ctx.obj['vector_store'] = store
    return ctx.obj['vector_store']


def get_pipeline(ctx, corpus: str, prompt_file=None) -> RAGPipeline:
    """Lazy-load the full RAG pipeline"""
    if ctx.obj['synthesizer'] is None:
        ctx.obj['synthesizer'] = ResponseSynthesizer(system_prompt=load_system_prompt(prompt_file))
    return RAGPipeline(
        vector_store=get_vector_store(ctx, corpus),
        synthesizer=ctx.obj['synthesizer']
    )


def results_table(results, title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Content", style="white")

    for i, result in enumerate(results, 1):
        color = 'green' if result.score >= 0.7 else 'yellow' if result.score >= 0.4 else 'red'
        table.add_row(str(i), f"[{color}]{result.score:.3f}[/{color}]", escape(result.content))

    return table


@click.group()
@click.option('--debug/--no-debug', default=False, help='Enable debug output')
@click.pass_context
def cli(ctx, debug):
    """pocketrag - question answering over pre-computed vectors"""
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug

    # Lazy initialization; callers may inject their own components
    ctx.obj.setdefault('embedding_generator', None)
    ctx.obj.setdefault('vector_store', None)
    ctx.obj.setdefault('synthesizer', None)


@cli.command()
@click.option('--output', '-o', default=None, help='Where to write the vector file')
@click.pass_context
def generate(ctx, output):
    """Pre-compute embeddings for the built-in documents"""
    output = output or default_corpus_path()

    try:
        preprocessor = VectorPreprocessor(embedding_generator=get_embedding_generator(ctx))
        result = preprocessor.generate_bundle(DOCUMENTS, output)
    except (RAGError, OSError) as e:
        fail(ctx, "Pre-processing failed", e)
        return

    table = Table(title="Pre-processing Results")
    table.add_column("Status", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Processed", f"[green]{result.processed}[/green]")
    table.add_row("Skipped", f"[yellow]{result.failed}[/yellow]")
    console.print(table)

    for skipped in result.skipped:
        console.print(f"[yellow]⚠[/yellow]  #{skipped.index}: {escape(skipped.reason)}")

    console.print(f"\n[green]✓ Vectors written to {escape(str(output))}[/green]")


@cli.command()
@click.argument('query')
@click.option('--limit', '-k', default=5, help='Number of results')
@click.option('--corpus', '-c', default=None, help='Vector file to search')
@click.pass_context
def search(ctx, query, limit, corpus):
    """Search the corpus by semantic similarity"""
    corpus = corpus or default_corpus_path()

    try:
        store = get_vector_store(ctx, corpus)
        results = store.search(query, top_k=limit)
    except RAGError as e:
        fail(ctx, "Search failed", e)
        return

    if not results:
        console.print("[yellow]No documents found[/yellow]")
        return

    console.print(results_table(results, f"🔍 {escape(query)}"))


@cli.command()
@click.argument('question')
@click.option('--limit', '-k', default=3, help='Number of context documents')
@click.option('--corpus', '-c', default=None, help='Vector file to search')
@click.option('--prompt-file', default=None, help='YAML file with a system_prompt key')
@click.pass_context
def ask(ctx, question, limit, corpus, prompt_file):
    """Answer a question using the closest documents as context"""
    corpus = corpus or default_corpus_path()

    try:
        pipeline = get_pipeline(ctx, corpus, prompt_file)
        with console.status("[cyan]Thinking...[/cyan]"):
            response = pipeline.query(question, top_k=limit)
    except (RAGError, ValueError) as e:
        fail(ctx, "Could not answer", e)
        return

    console.print(Panel(escape(response.answer), title=f"[bold]🤖 {escape(question)}[/bold]", expand=False))

    if response.sources:
        console.print("[dim]Sources:[/dim]")
        for i, (source, score) in enumerate(zip(response.sources, response.scores), 1):
            console.print(f"[dim]  \\[{i}] ({score:.3f}) {escape(source)}[/dim]")


@cli.command()
@click.option('--corpus', '-c', default=None, help='Vector file to search')
@click.option('--answer', is_flag=True, help='Also synthesize answers (needs OPENAI_API_KEY)')
@click.option('--limit', '-k', default=3, help='Results per query')
@click.pass_context
def demo(ctx, corpus, answer, limit):
    """Run the built-in demo queries"""
    corpus = corpus or default_corpus_path()

    try:
        if answer:
            pipeline = get_pipeline(ctx, corpus)
        else:
            store = get_vector_store(ctx, corpus)
    except (RAGError, ValueError) as e:
        fail(ctx, "Could not initialize", e)
        return

    queries = DEMO_QUESTIONS if answer else DEMO_QUERIES
    failures = 0

    for i, query in enumerate(queries, 1):
        console.rule(f"[bold cyan]{i}. {escape(query)}[/bold cyan]")
        try:
            if answer:
                response = pipeline.query(query, top_k=limit)
                console.print(Panel(escape(response.answer), title="🤖 Answer", expand=False))
            else:
                console.print(results_table(store.search(query, top_k=limit), "Results"))
        except RAGError as e:
            failures += 1
            console.print(f"[red]✗ {escape(str(e))}[/red]")

    console.print(f"\n[cyan]Queries run:[/cyan] {len(queries)}  [red]Failed:[/red] {failures}")


@cli.command()
@click.option('--corpus', '-c', default=None, help='Vector file to inspect')
@click.pass_context
def status(ctx, corpus):
    """Show corpus and configuration status"""
    corpus = corpus or default_corpus_path()
    path = Path(corpus)

    if not path.exists():
        console.print(f"[yellow]No vector file at {corpus}[/yellow]")
        console.print("Run: [cyan]pocketrag generate[/cyan]")
        return

    try:
        records = read_corpus(path)
    except LoadError as e:
        fail(ctx, "Vector file is unusable", e)
        return

    dimension = corpus_dimension(records)
    status_text = f"""[cyan]Corpus:[/cyan]
  File: {escape(str(path))}
  Records: [green]{len(records)}[/green]
  Dimension: {dimension if dimension is not None else '-'}
  Size: {path.stat().st_size / 1024.0 / 1024.0:.3f} MB

[cyan]Models:[/cyan]
  Embeddings: {os.getenv('EMBEDDING_MODEL', 'nomic-embed-text')}
  Chat: {os.getenv('RAG_CHAT_MODEL', 'gpt-4o-mini')}
  API key: {'[green]set[/green]' if os.getenv('OPENAI_API_KEY') else '[red]missing[/red]'}
"""
    console.print(Panel(status_text, title="[bold]pocketrag Status[/bold]", expand=False))


if __name__ == "__main__":
    cli()

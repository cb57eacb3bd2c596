import asyncio
from pathlib import Path

import aiofiles
import typer

from .config import app_config, database
from .core.exceptions import StoreError
from .database import DatabaseConnection, MemoryScoreStore, ScoreManager
from .parsing import parse_csv
from .services import ScoreService
from .logger import get_logger

logger = get_logger()
app = typer.Typer(add_completion=False)


async def run(csv_path: Path, use_memory: bool = False) -> int:
    """Load a CSV file of scores, store them, and print the top scorers"""
    csv_path = csv_path.resolve()
    if not csv_path.exists():
        logger.error(f"CSV file '{csv_path}' does not exist.")
        return 1

    connection = None
    try:
        if use_memory:
            store = MemoryScoreStore()
        else:
            connection = DatabaseConnection(auto_migrate=app_config.auto_migrate)
            await connection.initialize()
            store = ScoreManager(connection, max_retries=database.max_retries, retry_delay=database.retry_delay)

        # utf-8-sig drops a leading byte order mark
        async with aiofiles.open(csv_path, mode='r', encoding='utf-8-sig') as f:
            csv_content = await f.read()

        records = parse_csv(csv_content)
        if not records:
            logger.warning("No records were parsed from the file.")
            return 0

        service = ScoreService(store)
        await service.ingest(records)
        top = await service.top_scorers()
        if not top.people:
            logger.info("No scores are stored in the database yet.")
            return 0

        for person in top.people:
            typer.echo(person.full_name)
        typer.echo(f"Score: {top.score}")
        return 0
    except OSError as e:
        logger.error(f"Failed to read CSV file: {csv_path}: {e}")
        typer.echo(f"File Error: {e}")
        return 1
    except StoreError as e:
        logger.error(f"Database error occurred while saving scores: {e}")
        typer.echo(f"Database Error: Failed to save scores. {e.__cause__ or e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error while loading {csv_path}: {e}")
        typer.echo(f"Error: {e}")
        return 1
    finally:
        if connection:
            await connection.close()


@app.command()
def main(
    csv_path: Path = typer.Argument(..., help="Path to a CSV file with First Name, Second Name and Score columns"),
    memory: bool = typer.Option(False, "--memory", help="Keep scores in memory instead of PostgreSQL"),
):
    code = asyncio.run(run(csv_path, use_memory=memory or app_config.store == 'memory'))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()

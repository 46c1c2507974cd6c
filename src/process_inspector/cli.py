"""
Process State Inspector CLI
"""
import click
import json
import logging
from dotenv import load_dotenv

from .config import InspectorSettings
from .core import ProcessStateInspector, ProcessStateRenderer
from .exceptions import ProcessInspectorError


@click.group()
@click.option('--log-level', default=None, help='Logging level (defaults to INSPECTOR_LOG_LEVEL)')
@click.pass_context
def cli(ctx, log_level):
    """Process State Inspector CLI"""
    settings = InspectorSettings.from_env()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    ctx.obj = settings


@cli.command()
@click.argument('process_instance_id')
@click.option('--database-url', default=None, help='Engine runtime database URL')
@click.option('--snapshot', type=click.Path(exists=True, dir_okay=False),
              help='YAML/JSON runtime snapshot to read instead of a database')
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.option('--base-indent', type=click.IntRange(min=0), default=None, help='Indentation of the root execution')
@click.option('--strict', is_flag=True, help='Fail on structural anomalies')
@click.pass_obj
def dump(settings, process_instance_id, database_url, snapshot, output_format, base_indent, strict):
    """Dump the current state of a process instance"""
    db_manager = None
    try:
        if snapshot:
            from .storage.snapshot import SnapshotLoader
            query_service = SnapshotLoader().load(snapshot)
        else:
            from .storage.sqlalchemy_repository import DatabaseManager, SQLAlchemyRuntimeQueryService
            db_manager = DatabaseManager(database_url or settings.database_url)
            db_manager.initialize()
            query_service = SQLAlchemyRuntimeQueryService(db_manager)

        inspector = ProcessStateInspector(
            query_service,
            renderer=ProcessStateRenderer(
                indent_step=settings.indent_step,
                base_indent=settings.base_indent if base_indent is None else base_indent
            ),
            strict=strict or settings.strict
        )

        if output_format == 'json':
            tree = inspector.describe_process_state(process_instance_id)
            click.echo(json.dumps(tree, indent=2, default=str))
        else:
            inspector.dump_process_state(process_instance_id)
    except ProcessInspectorError as e:
        raise click.ClickException(str(e))
    finally:
        if db_manager is not None:
            db_manager.close()


@cli.command()
@click.option('--host', default=None, help='Host to bind to')
@click.option('--port', type=int, default=None, help='Port to bind to')
@click.option('--reload', is_flag=True, help='Enable auto-reload')
@click.pass_obj
def serve(settings, host, port, reload):
    """Start the API server"""
    import uvicorn

    host = host or settings.api_host
    port = port or settings.api_port
    click.echo(f"Starting API server on {host}:{port}")
    uvicorn.run(
        "process_inspector.api:app",
        host=host,
        port=port,
        reload=reload or settings.api_reload
    )


def main():
    """Main entry point"""
    load_dotenv()
    cli()


if __name__ == '__main__':
    main()

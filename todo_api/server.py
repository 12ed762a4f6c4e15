"""
Service bootstrap and multi-port listeners
Brings up the database, then serves one FastAPI app on every configured port
Reference: https://www.uvicorn.org/deployment/#running-programmatically
"""
import asyncio
import contextlib
import logging
import signal

import uvicorn
from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from todo_api.core.config import Settings
from todo_api.core.database import Database
from todo_api.core.exceptions import StartupError
from todo_api.main import create_app

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class ListenerServer(uvicorn.Server):
    """
    uvicorn server that leaves signal handling to its Listeners group

    uvicorn installs its own SIGINT/SIGTERM handlers per server; with several
    servers in one process only the last one installed would be told to stop.
    """

    def install_signal_handlers(self) -> None:
        pass

    @contextlib.contextmanager
    def capture_signals(self):
        yield


class Listeners:
    """
    One uvicorn server per port, all serving the same app
    """

    def __init__(self, app: FastAPI, settings: Settings):
        self.servers = [
            ListenerServer(
                uvicorn.Config(
                    app,
                    host=settings.LISTEN_HOST,
                    port=port,
                    lifespan="off",
                    timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
                    log_config=None,  # Keep the root logging configuration
                )
            )
            for port in settings.LISTEN_PORTS
        ]

    def shutdown(self) -> None:
        """Ask every server to stop accepting and drain in-flight requests"""
        logger.info("Shutting down listeners")
        for server in self.servers:
            server.should_exit = True

    def install_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in SHUTDOWN_SIGNALS:
            loop.add_signal_handler(sig, self.shutdown)

    async def serve(self) -> None:
        """
        Run every server until shutdown

        A server that cannot bind its port exits the process with status 1
        (uvicorn raises SystemExit), taking the other listeners down with it.
        """
        self.install_signal_handlers()
        for server in self.servers:
            logger.info(f"Server starting on port {server.config.port}")
        await asyncio.gather(*(server.serve() for server in self.servers))


async def init_database(settings: Settings) -> Database:
    """
    Open the pool, probe it, provision the schema and seed it

    Raises:
        StartupError: the database is unreachable or the schema could not be created
    """
    try:
        database = Database.from_settings(settings)
    except (SQLAlchemyError, ValueError) as e:
        raise StartupError(f"Invalid database configuration: {e}") from e

    try:
        await database.ping()
    except Exception as e:
        # Drivers reject unknown connect options with TypeError
        await database.dispose()
        raise StartupError(f"Failed to initialize database: {e}") from e
    logger.info("Successfully connected to PostgreSQL")

    try:
        await database.init_schema()
    except (SQLAlchemyError, OSError) as e:
        await database.dispose()
        raise StartupError(f"Failed to initialize schema: {e}") from e

    await database.seed()
    return database


async def serve(settings: Settings) -> None:
    """
    Start the service and block until it is shut down

    The pool is disposed only after every listener has stopped.
    """
    database = await init_database(settings)
    try:
        app = create_app(database, settings)
        await Listeners(app, settings).serve()
    finally:
        await database.dispose()

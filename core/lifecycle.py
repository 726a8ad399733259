"""
Service Lifecycle

Explicit start/stop for a FastAPI app served by uvicorn:

    handle = await start(app, host="0.0.0.0", port=8080)
    ...
    await stop(handle)   # stops accepting, drains in-flight requests, runs lifespan shutdown

uvicorn maps SIGINT/SIGTERM onto the same drain when serving in the main thread.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)


@dataclass
class ServiceHandle:
    """A running uvicorn server and the task serving it"""
    server: uvicorn.Server
    task: asyncio.Task

    @property
    def port(self) -> Optional[int]:
        """Port actually bound (useful when started with port=0)"""
        for server in self.server.servers:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return None

    @property
    def running(self) -> bool:
        return self.server.started and not self.task.done()

    async def wait_closed(self) -> None:
        """Block until the server exits (signal or stop())"""
        await self.task


async def _serve(server: uvicorn.Server, host: str, port: int) -> None:
    # uvicorn calls sys.exit() when startup fails (e.g. the port is taken)
    try:
        await server.serve()
    except SystemExit as e:
        raise RuntimeError(f"Server on {host}:{port} failed to start (exit code {e.code})") from e


async def start(
    app: FastAPI,
    host: str = "0.0.0.0",
    port: int = 8000,
    graceful_timeout: float = 15.0,
) -> ServiceHandle:
    """
    Start serving app and return once the socket is listening

    Args:
        app: ASGI application
        host: Bind address
        port: Bind port (0 picks a free port)
        graceful_timeout: Upper bound for draining in-flight requests on stop

    Raises:
        RuntimeError: Server exited before it started listening
    """
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_config=None,
        timeout_graceful_shutdown=graceful_timeout,
    )
    server = uvicorn.Server(config)
    task = asyncio.create_task(_serve(server, host, port))

    while not server.started:
        if task.done():
            task.result()
            raise RuntimeError(f"Server on {host}:{port} exited during startup")
        await asyncio.sleep(0.05)

    handle = ServiceHandle(server=server, task=task)
    logger.info(f"✅ Listening on {host}:{handle.port}")
    return handle


async def stop(handle: ServiceHandle) -> None:
    """Ask the server to exit and wait for in-flight requests to complete"""
    if handle.task.done():
        return
    logger.info("Shutting down server...")
    handle.server.should_exit = True
    await handle.task
    logger.info("Server stopped")


__all__ = ["ServiceHandle", "start", "stop"]

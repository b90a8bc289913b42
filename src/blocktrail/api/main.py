import asyncio
import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import JSONResponse

from blocktrail import __version__
from blocktrail.api.blocks import router as blocks_router
from blocktrail.api.subscriptions import router as subscriptions_router
from blocktrail.api.sync import router as sync_router
from blocktrail.api.transactions import router as transactions_router
from blocktrail.container import Container
from blocktrail.sync.engine import SyncEngine

logger = logging.getLogger("blocktrail.api")


def log_engine_exit(task: asyncio.Task) -> None:
    """Report a sync engine task that ended on its own error."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Sync engine crashed, chain sync halted", exc_info=exc)


async def stop_engine(engine: SyncEngine, task: asyncio.Task) -> None:
    """Stop the engine, cancelling it if an in-flight fetch keeps it past the grace period."""
    engine.stop()
    grace = engine.policy.poll_interval + 1.0
    try:
        await asyncio.wait_for(task, timeout=grace)
    except asyncio.TimeoutError:
        logger.warning("Sync engine did not stop within %.1fs, cancelled", grace)
    except Exception:
        # Already reported by log_engine_exit
        pass


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = Container()
    app.state.container = container

    engine = container.sync_engine()
    task: asyncio.Task | None = None
    if container.settings().sync_enabled:
        task = asyncio.create_task(engine.run(), name="sync-engine")
        task.add_done_callback(log_engine_exit)
    else:
        logger.info("Sync disabled, serving store only")

    yield

    if task is not None:
        await stop_engine(engine, task)
    else:
        engine.stop()
    await container.rpc_transport().close()
    container.unwire()


app = FastAPI(title="blocktrail", version=__version__, lifespan=lifespan)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.include_router(blocks_router)
app.include_router(subscriptions_router)
app.include_router(transactions_router)
app.include_router(sync_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}

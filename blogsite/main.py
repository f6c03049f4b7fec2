from fastapi import FastAPI

from .database import init_db
from .routers import blog


app = FastAPI(title="blogsite")

app.include_router(blog.router)


@app.on_event("startup")
def startup() -> None:
    init_db()


@app.get("/health")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}

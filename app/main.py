# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.routes import fortune_routes, root_routes
from app.core.config import settings
from app.core.startup import startup_event

app = FastAPI(title="Fortune Teller API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(root_routes.router)
app.include_router(fortune_routes.router, prefix="/api/fortune")

@app.on_event("startup")
async def app_startup():
    await startup_event(app)

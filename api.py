# api.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rescisao.calculo.router import router as rescisao_router
from rescisao.config import settings
from rescisao.logging_config import log

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rotas da calculadora (/api/v1/rescisao/...)
app.include_router(rescisao_router)


@app.get("/")
def read_root():
    return {"status": "online", "app": settings.APP_NAME, "version": settings.APP_VERSION}


log.info(f"{settings.APP_NAME} v{settings.APP_VERSION} pronta.")

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fmcg_studio import __version__
from fmcg_studio.app.api.v1.api import api_router
from fmcg_studio.app.utils.exceptions import AppException
from fmcg_studio.core.config import settings
from fmcg_studio.core.logging import setup_logging

# Initialize logging
setup_logging()

app = FastAPI(
    title="FMCG AI Studio API",
    version=__version__,
    description="AI trend forecasting and product ideation for FMCG brands"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(AppException)
async def app_exception_handler(request: Request, exc: AppException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": "error",
            "message": exc.message,
            "path": str(request.url)
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("fmcg_studio.app.main:app", host="0.0.0.0", port=8000)

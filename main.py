from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from dotenv import load_dotenv

from program_matching.routes import router as program_matching_router
from program_matching.logic.candidate_generator import get_catalog, get_career_path_catalog

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logging.info("App starting")

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

app = FastAPI(title="Net Pathway Program Matching")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(program_matching_router)


# Load both catalogs before serving requests
get_catalog()
get_career_path_catalog()


@app.get("/", tags=["meta"], summary="Service root")
def root():
    return {"service": "net-pathway-program-matching", "status": "ok"}

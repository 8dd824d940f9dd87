"""
Nordum API Server.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from nordum.server.deps import get_lexicon
from nordum.server.routes import dictionary, spellcheck


VERSION = "0.1.0"


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("Nordum API Routes")
    print("=" * 60)
    
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))
    
    routes.sort(key=lambda r: (r[1], r[0]))
    
    for methods, path, name in routes:
        print(f"  {methods:8} {path:40} → {name}")
    
    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    lexicon = get_lexicon()
    print(f"Dictionary ready: {len(lexicon.index)} entries")
    print_routes(app)
    yield


app = FastAPI(title="Nordum API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(dictionary.router)
app.include_router(spellcheck.router)


@app.get("/")
async def root():
    return {"name": "Nordum API", "version": VERSION}

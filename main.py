# main.py
from fastapi.middleware.cors import CORSMiddleware
import os
from dotenv import load_dotenv

from fastapi import FastAPI, Request, Response
from utils.keep_alive import start_keep_alive
from api import auth, body, history, plans, progress, workouts
from services.supabase_service import init_supabase_service, get_supabase_service
from services.auth_service import init_auth_service

APP_VERSION = "1.0.0"

# Load environment variables
load_dotenv()

# Initialize FastAPI app
app = FastAPI(
    title="FitTrack API",
    description="Workout logging backend: records, body measurements, history, progress charts and plans",
    version=APP_VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "https://*.vercel.app",                                 # All Vercel subdomains
        "https://*.onrender.com",                               # Render domains
        "http://localhost:3000",                                # Local web client
        "*"                                                     # Allow all origins (for testing)
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services on startup
@app.on_event("startup")
async def startup_event():
    """Initialize services when the app starts"""
    print("🚀 Starting FitTrack API...")

    try:
        init_supabase_service()
        print("✅ Supabase service initialized")

        init_auth_service()
        print("✅ Auth service initialized")

        # Only in production
        app.state.keep_alive_task = start_keep_alive()
        if app.state.keep_alive_task:
            print("✅ Keep-alive service started")

        print("🎉 Backend startup complete!")

    except Exception as e:
        print(f"❌ Error during startup: {e}")
        raise

# Include API routers
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(workouts.router, prefix="/api", tags=["workouts"])
app.include_router(history.router, prefix="/api/history", tags=["history"])
app.include_router(progress.router, prefix="/api/progress", tags=["progress"])
app.include_router(body.router, prefix="/api/body", tags=["body"])
app.include_router(plans.router, prefix="/api/plans", tags=["plans"])

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "FitTrack API",
        "version": APP_VERSION,
        "status": "running",
        "features": ["auth", "workout_records", "body_measurements", "history", "progress_chart", "workout_plans"]
    }

@app.options("/{rest_of_path:path}")
async def preflight_handler(request: Request, rest_of_path: str):
    """Handle CORS preflight requests"""
    response = Response()
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "*"
    return response

# Health check endpoint
@app.get("/health")
async def health_check():
    try:
        supabase_service = get_supabase_service()
        supabase_health = await supabase_service.health_check()

        return {
            "status": "healthy" if supabase_health["status"] == "healthy" else "degraded",
            "services": {
                "api": "healthy",
                "supabase": supabase_health
            },
            "message": "All services are running" if supabase_health["status"] == "healthy" else "Supabase is unreachable"
        }

    except Exception as e:
        return {
            "status": "unhealthy",
            "error": str(e),
            "message": "Some services are down"
        }

if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)

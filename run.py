"""
Kakinada CCC — Standalone Server

Boots the command center from a single Python command:
  python run.py

Starts:
  - FastAPI app with the server-rendered UI at /ui
  - JSON API under /api/v1
  - No database, no inference service: everything is mock data in memory

Usage:
  pip install -e .
  python run.py
"""
from kakinada_ccc.config import get_settings

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    base = f"http://localhost:{settings.APP_PORT}"

    print("=" * 60)
    print("  Mobius — CCC  |  Kakinada Smart Policing (demo mode)")
    print("=" * 60)
    print(f"  UI:       {base}/ui")
    print(f"  API:      {base}/docs")
    print(f"  Health:   {base}/health")
    print(f"  Metrics:  {base}/metrics")
    print("=" * 60)

    uvicorn.run(
        "kakinada_ccc.main:create_app",
        factory=True,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=settings.APP_DEBUG,
    )

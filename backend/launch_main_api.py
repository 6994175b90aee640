#!/usr/bin/env python3
"""Launch the nutrition API server."""

if __name__ == "__main__":
    import uvicorn

    print("Starting Sazonly API on http://127.0.0.1:8000 (Ctrl+C to stop)")
    uvicorn.run(
        "sazonly.main:app",
        app_dir="src",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )

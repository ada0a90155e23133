# core/supabase_client.py

from supabase import create_client, Client
from core.config import settings
from core.errors import Unavailable
from core.logging_config import logger


TABLES = ["users", "apartments", "agreements", "coupons", "payments"]


# ============================================================
# Supabase Client Factory (ALWAYS service role)
# ============================================================

def get_supabase_client() -> Client:
    """
    Creates a Supabase client using the SERVICE ROLE KEY.
    Every table is read and written by the API on behalf of callers,
    so row-level security is bypassed and enforced in the Access Gate.
    """
    supabase_url = settings.SUPABASE_URL
    supabase_key = settings.SUPABASE_SERVICE_ROLE_KEY

    if not supabase_url or not supabase_key:
        logger.error("Missing Supabase credentials")
        logger.error(f"   URL: {supabase_url}")
        logger.error(f"   SERVICE ROLE KEY: {'SET' if supabase_key else 'MISSING'}")
        raise Unavailable("Database not configured")

    try:
        return create_client(supabase_url, supabase_key)
    except Exception as e:
        logger.error(f"Supabase Init Error: {e}", exc_info=True)
        raise Unavailable("Database connection failed") from e


# ============================================================
# Ping Supabase for health checks
# ============================================================

def ping_supabase() -> dict:
    """
    Simple connectivity check over every table the API owns.
    """
    try:
        client = get_supabase_client()
    except Unavailable as e:
        return {"service": "Supabase", "status": "not_configured", "detail": e.detail}

    results = {}
    for t in TABLES:
        try:
            res = client.table(t).select("*").limit(1).execute()
            results[t] = {
                "status": "ok",
                "rows_found": len(res.data or [])
            }
        except Exception as err:
            results[t] = {"status": "error", "detail": str(err)}

    overall = "ok" if all(r["status"] == "ok" for r in results.values()) else "degraded"
    return {
        "service": "Supabase",
        "status": overall,
        "tables": results,
    }

# scripts/smoke_test.py
"""
Manual smoke test against a live Supabase project.

Usage:
    SMOKE_EMAIL=testuser@example.com SMOKE_PASSWORD=test123456 python scripts/smoke_test.py

Email confirmation must be disabled in the Supabase dashboard, or the test
account confirmed, for the login step to succeed.
"""
import asyncio
import os
import sys

from dotenv import load_dotenv

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from services.auth_service import AuthService
from services.errors import EmailNotConfirmedError, FitTrackError
from services.supabase_service import SupabaseService
from utils.date_labels import group_by_date_label
from utils.share_utils import copy_to_clipboard, generate_share_text

async def run_smoke_test(email: str, password: str) -> bool:
    auth_service = AuthService()
    supabase_service = SupabaseService()

    print("Test 1: signing in...")
    try:
        result = await auth_service.sign_in(email, password)
    except EmailNotConfirmedError as e:
        print(f"❌ {e}")
        print("Fix:")
        print("1. Disable email confirmation in the Supabase dashboard")
        print("   - Authentication → Settings → turn off \"Enable email confirmations\"")
        print("2. Or confirm the user manually")
        print("   - Authentication → Users → select the user → Confirm email")
        return False
    except FitTrackError as e:
        print(f"❌ Login failed: {e}")
        return False

    token = result.session.access_token
    print(f"✅ Signed in as {result.identity.email}")

    print("\nTest 2: checking the session...")
    identity = await auth_service.get_current_identity(token)
    if identity is None:
        print("❌ Session not recognised")
        return False
    print(f"✅ Session belongs to {identity.email}")

    print("\nTest 3: loading history...")
    workouts = await supabase_service.get_workouts(identity.id)
    for label, records in group_by_date_label(workouts).items():
        print(f"📅 {label}")
        for record in records:
            print(f"   {record['exercise_name']}: {record['weight']}kg × {record['reps']} × {record['sets']}")

    if workouts:
        print("\nTest 4: copying the newest record's share text...")
        if copy_to_clipboard(generate_share_text(workouts[0])):
            print("✅ Share text copied to clipboard")
        else:
            print("⚠️ Clipboard not available, share text:")
            print(generate_share_text(workouts[0]))

    print("\nTest 5: signing out...")
    await auth_service.sign_out(token)
    print("✅ Signed out")
    return True

def main() -> int:
    load_dotenv()

    email = os.getenv("SMOKE_EMAIL")
    password = os.getenv("SMOKE_PASSWORD")
    if not email or not password:
        print("Set SMOKE_EMAIL and SMOKE_PASSWORD first")
        return 2

    try:
        ok = asyncio.run(run_smoke_test(email, password))
    except FitTrackError as e:
        print(f"❌ {e}")
        return 1
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())

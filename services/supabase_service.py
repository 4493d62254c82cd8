# services/supabase_service.py
from supabase import create_client, Client
import os
from typing import Dict, List, Optional, Any
from datetime import datetime, timedelta

from services.errors import classify_backend_error
from utils.timezone_utils import get_utc_now

BODY_HISTORY_LIMIT = 30
CHART_WINDOW_DAYS = 30

def _normalize_row(row: Dict[str, Any]) -> Dict[str, Any]:
    """Supabase may hand back integer ids; the API always exposes strings"""
    row = dict(row)
    if row.get('id') is not None:
        row['id'] = str(row['id'])
    if row.get('user_id') is not None:
        row['user_id'] = str(row['user_id'])
    return row

class SupabaseService:
    def __init__(self, client: Optional[Client] = None):
        if client is None:
            url = os.getenv("SUPABASE_URL")
            key = os.getenv("SUPABASE_SERVICE_KEY")

            if not url or not key:
                raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set in environment variables")

            client = create_client(url, key)
            print("✅ Supabase client initialized")

        self.client: Client = client

    # Exercise catalog
    async def get_exercises(self, order_by: str = 'category') -> List[Dict[str, Any]]:
        """Get the exercise catalog ordered by category (entry form) or name (chart picker)"""
        if order_by not in ('category', 'name'):
            order_by = 'category'

        try:
            response = self.client.table('exercises')\
                .select('*')\
                .order(order_by, desc=False)\
                .execute()

            return [_normalize_row(row) for row in response.data or []]
        except Exception as e:
            print(f"❌ Error getting exercises: {e}")
            raise classify_backend_error(e, "Failed to load exercises") from e

    # Workout operations
    async def create_workout(self, workout_data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one workout record"""
        try:
            print(f"🔍 Creating workout for user {workout_data.get('user_id')}: {workout_data.get('exercise_name')}")

            response = self.client.table('workouts').insert(workout_data).execute()

            if response.data:
                created = _normalize_row(response.data[0])
                print(f"✅ Workout created: {created['id']}")
                return created
            else:
                raise Exception("No data returned from Supabase")

        except Exception as e:
            print(f"❌ Error creating workout: {e}")
            raise classify_backend_error(e, "Failed to save workout") from e

    async def get_workouts(
        self,
        user_id: str,
        exercise_name: Optional[str] = None,
        since: Optional[datetime] = None,
        ascending: bool = False,
        columns: str = '*'
    ) -> List[Dict[str, Any]]:
        """Get a user's workouts, optionally for one exercise and from a start time"""
        try:
            query = self.client.table('workouts').select(columns).eq('user_id', user_id)

            if exercise_name:
                query = query.eq('exercise_name', exercise_name)
            if since:
                query = query.gte('created_at', since.isoformat())

            response = query.order('created_at', desc=not ascending).execute()

            workouts = [_normalize_row(row) for row in response.data or []]
            print(f"✅ Found {len(workouts)} workouts for user {user_id}")
            return workouts

        except Exception as e:
            print(f"❌ Error getting workouts: {e}")
            raise classify_backend_error(e, "Failed to load workouts") from e

    async def get_workout(self, user_id: str, workout_id: str) -> Optional[Dict[str, Any]]:
        """Get one workout owned by the user"""
        try:
            response = self.client.table('workouts')\
                .select('*')\
                .eq('user_id', user_id)\
                .eq('id', workout_id)\
                .limit(1)\
                .execute()

            return _normalize_row(response.data[0]) if response.data else None
        except Exception as e:
            print(f"❌ Error getting workout {workout_id}: {e}")
            raise classify_backend_error(e, "Failed to load workout") from e

    async def get_recent_exercise_workouts(self, user_id: str, exercise_name: str,
                                           days: int = CHART_WINDOW_DAYS) -> List[Dict[str, Any]]:
        """Weight series for one exercise over the last N days, oldest first"""
        since = get_utc_now() - timedelta(days=days)
        return await self.get_workouts(
            user_id,
            exercise_name=exercise_name,
            since=since,
            ascending=True,
            columns='id, weight, created_at'
        )

    # Body measurement operations
    async def create_body_measurement(self, measurement_data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one body measurement"""
        try:
            print(f"⚖️ Saving body measurement: {measurement_data.get('weight')} kg for user {measurement_data.get('user_id')}")

            response = self.client.table('body_measurements').insert(measurement_data).execute()

            if response.data:
                return _normalize_row(response.data[0])
            else:
                raise Exception("No data returned from Supabase")
        except Exception as e:
            print(f"❌ Error creating body measurement: {e}")
            raise classify_backend_error(e, "Failed to save body measurement") from e

    async def get_body_measurements(self, user_id: str, limit: int = BODY_HISTORY_LIMIT) -> List[Dict[str, Any]]:
        """Get the latest body measurements for a user"""
        try:
            print(f"🔍 Getting {limit} body measurements for user: {user_id}")

            response = self.client.table('body_measurements')\
                .select('*')\
                .eq('user_id', user_id)\
                .order('created_at', desc=True)\
                .limit(limit)\
                .execute()

            return [_normalize_row(row) for row in response.data or []]
        except Exception as e:
            print(f"❌ Error getting body measurements: {e}")
            raise classify_backend_error(e, "Failed to load body measurements") from e

    # Workout plans
    async def get_workout_plans(self) -> List[Dict[str, Any]]:
        """Get predefined plans ordered by difficulty"""
        try:
            response = self.client.table('workout_plans')\
                .select('*')\
                .order('difficulty', desc=False)\
                .execute()

            return [_normalize_row(row) for row in response.data or []]
        except Exception as e:
            print(f"❌ Error getting workout plans: {e}")
            raise classify_backend_error(e, "Failed to load workout plans") from e

    async def get_workout_plan(self, plan_id: str) -> Optional[Dict[str, Any]]:
        """Get one plan by ID"""
        try:
            response = self.client.table('workout_plans')\
                .select('*')\
                .eq('id', plan_id)\
                .limit(1)\
                .execute()

            return _normalize_row(response.data[0]) if response.data else None
        except Exception as e:
            print(f"❌ Error getting workout plan {plan_id}: {e}")
            raise classify_backend_error(e, "Failed to load workout plan") from e

    # Health check method
    async def health_check(self) -> Dict[str, Any]:
        """Check if Supabase connection is working"""
        try:
            self.client.table('exercises').select('id').limit(1).execute()

            return {
                "status": "healthy",
                "message": "Supabase connection working",
                "timestamp": get_utc_now().isoformat()
            }

        except Exception as e:
            return {
                "status": "unhealthy",
                "message": f"Supabase connection failed: {str(e)}",
                "timestamp": get_utc_now().isoformat()
            }

# Global instance - initialized in main.py, injected into routes with Depends
supabase_service = None

def get_supabase_service() -> SupabaseService:
    """Get the global Supabase service instance"""
    global supabase_service
    if supabase_service is None:
        supabase_service = SupabaseService()
    return supabase_service

def init_supabase_service():
    """Initialize the global Supabase service"""
    global supabase_service
    supabase_service = SupabaseService()
    return supabase_service

# utils/exercise_videos.py
from typing import Optional
from urllib.parse import quote_plus

YOUTUBE_SEARCH = "https://www.youtube.com/results?search_query="

# Exercise name -> tutorial search terms
EXERCISE_VIDEO_QUERIES = {
    # Legs
    'Squat': 'squat tutorial',
    'Front Squat': 'front squat tutorial',
    'Deadlift': 'deadlift tutorial',
    'Romanian Deadlift': 'romanian deadlift tutorial',
    'Leg Press': 'leg press tutorial',
    'Lunge': 'lunge tutorial',

    # Chest
    'Bench Press': 'bench press tutorial',
    'Incline Bench Press': 'incline bench press tutorial',
    'Dumbbell Bench Press': 'dumbbell bench press tutorial',
    'Push Up': 'push up tutorial',

    # Back
    'Pull Up': 'pull up tutorial',
    'Lat Pulldown': 'lat pulldown tutorial',
    'Barbell Row': 'barbell row tutorial',
    'Seated Row': 'seated row tutorial',

    # Shoulders
    'Overhead Press': 'overhead press tutorial',
    'Lateral Raise': 'lateral raise tutorial',
    'Face Pull': 'face pull tutorial',

    # Arms
    'Bicep Curl': 'bicep curl tutorial',
    'Tricep Pushdown': 'tricep pushdown tutorial',
    'Hammer Curl': 'hammer curl tutorial',
}

EXERCISE_VIDEOS = {
    name: YOUTUBE_SEARCH + quote_plus(query)
    for name, query in EXERCISE_VIDEO_QUERIES.items()
}

def get_exercise_video(exercise_name: Optional[str]) -> Optional[str]:
    """Tutorial link for an exercise, matched case-insensitively"""
    if not exercise_name:
        return None

    wanted = exercise_name.strip().lower()
    for name, url in EXERCISE_VIDEOS.items():
        if name.lower() == wanted:
            return url
    return None

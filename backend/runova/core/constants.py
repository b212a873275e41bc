"""Shared application constants.

Plan durations and the plan schema handed to the completion service live here
as plain data so new goal types only need a new entry.
"""

# Kilometres in one statute mile
KM_PER_MILE = 1.60934

# Plan length in weeks per goal category
PLAN_DURATION_WEEKS = {
    "5k": 8,
    "10k": 10,
    "half_marathon": 12,
    "marathon": 16,
    "custom": 12,
}

# Used for goals missing from PLAN_DURATION_WEEKS
DEFAULT_PLAN_WEEKS = 12

GOAL_LABELS = {
    "5k": "5K",
    "10k": "10K",
    "half_marathon": "Half Marathon",
    "marathon": "Marathon",
    "custom": "Custom",
}

DISTANCE_UNIT_NAMES = {
    "mi": "miles",
    "km": "kilometers",
}

# Days in a calendar week; workout `day` values run 1..7 from the week start
DAYS_PER_WEEK = 7

# Output structure requested from the completion service. Rendered into the
# prompt verbatim (with the distance unit filled in).
PLAN_RESPONSE_SCHEMA = """{
  "planName": "string - creative name for the plan",
  "weeklySchedule": [
    {
      "week": 1,
      "totalMileage": number,
      "workouts": [
        {
          "day": 1,
          "type": "easy_run" | "long_run" | "tempo" | "intervals" | "recovery" | "rest",
          "distance": number (in {unit_name}, can be decimal),
          "duration": number (estimated minutes),
          "description": "string - detailed workout instructions",
          "intensity": "easy" | "moderate" | "hard"
        }
      ]
    }
  ],
  "recommendations": "string - overall training advice and tips specific to this runner"
}"""

COACH_SYSTEM_PROMPT = (
    "You are an expert running coach who creates detailed, personalized "
    "training plans. Always respond with valid JSON only."
)

PLAN_REQUIREMENTS = [
    "Create a progressive training plan that builds safely",
    "Include variety: easy runs, long runs, tempo runs, intervals, and recovery/rest days",
    "Follow the 10% rule for weekly mileage increases",
    "Include a taper period if preparing for a race",
    "Provide specific guidance for each workout type",
    "Take into account any special events, injury history, and training frequency",
]

SKIPPED_WORKOUT_NOTE = "Skipped"

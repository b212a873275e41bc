PLAN_BODY = {"planName": "Spring 10K", "goal": "10k", "trainingFrequency": 3}


def test_dashboard_without_plan(client, headers):
    r = client.get("/dashboard/", headers=headers)
    assert r.status_code == 200
    data = r.json()
    assert data["plan"] is None
    assert data["week_start"] == "2025-03-23"
    assert data["days"] == []
    assert data["progress"] is None


def test_dashboard_current_week(client, headers):
    plan = client.post("/generate-plan", json=PLAN_BODY, headers=headers).json()["plan"]

    r = client.get("/dashboard/", headers=headers)
    assert r.status_code == 200
    data = r.json()
    assert data["plan"]["id"] == plan["id"]
    assert data["week_start"] == "2025-03-23"
    assert data["distance_unit"] == "mi"
    assert [d["date"] for d in data["days"]] == [
        "2025-03-23", "2025-03-24", "2025-03-25", "2025-03-26", "2025-03-27", "2025-03-28", "2025-03-29",
    ]
    counts = [len(d["workouts"]) for d in data["days"]]
    assert counts == [1, 0, 1, 0, 1, 0, 0]
    assert data["days"][0]["workouts"][0]["workout_type"] == "long_run"
    assert data["days"][0]["planned_distance"] == "7 mi"
    assert data["days"][1]["planned_distance"] == "-"
    assert data["progress"] == {"completed": 0, "total": 6, "percentage": 0.0}


def test_dashboard_other_week_and_unit(client, headers):
    client.post("/generate-plan", json=PLAN_BODY, headers=headers)

    # Any day snaps to its Sunday
    r = client.get("/dashboard/", params={"week_start": "2025-04-01", "unit": "km"}, headers=headers)
    data = r.json()
    assert data["week_start"] == "2025-03-30"
    assert data["distance_unit"] == "km"
    # 8 mi long run -> 12.87 km -> "13 km"
    assert data["days"][0]["planned_distance"] == "13 km"
    # 4 mi -> 6.44 km -> "6.5 km"
    assert data["days"][2]["planned_distance"] == "6.5 km"


def test_dashboard_progress_counts_completed(client, headers):
    client.post("/generate-plan", json=PLAN_BODY, headers=headers)
    workouts = client.get("/workouts/", headers=headers).json()

    client.put(f"/workouts/{workouts[0]['id']}/log", json={"actualDistance": 7}, headers=headers)
    client.put(f"/workouts/{workouts[1]['id']}/skip", headers=headers)

    r = client.get("/dashboard/", headers=headers)
    assert r.json()["progress"] == {"completed": 2, "total": 6, "percentage": 33.3}


def test_dashboard_ignores_other_users_plans(client, headers, other_headers):
    client.post("/generate-plan", json=PLAN_BODY, headers=other_headers)
    r = client.get("/dashboard/", headers=headers)
    assert r.json()["plan"] is None

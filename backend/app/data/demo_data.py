"""Fixed content loaded by app.scripts.load_demo_data."""

DEMO_USER_EMAIL = "demo@example.com"
DEMO_USER_PASSWORD = "demo"

demo_categories = [
    {
        "name": "Technology",
        "slug": "technology",
        "description": "Software, hardware and the web",
        "color": "#3b82f6",
    },
    {
        "name": "Travel",
        "slug": "travel",
        "description": "Trips, places and travel tips",
        "color": "#10b981",
    },
    {
        "name": "Food",
        "slug": "food",
        "description": "Recipes and restaurant notes",
        "color": "#f59e0b",
    },
    {
        "name": "Lifestyle",
        "slug": "lifestyle",
        "description": "Habits, health and everyday life",
        "color": "#ec4899",
    },
]

demo_posts = [
    {
        "title": "Getting Started with FastAPI",
        "slug": "getting-started-with-fastapi",
        "excerpt": "Build a small JSON API in a few minutes.",
        "content": (
            "FastAPI builds request validation and documentation on top of type hints. "
            "In this post we create an application, add a couple of routes, and look at "
            "how dependencies keep database sessions and settings out of the handlers. "
            "By the end you will have an API that validates input, returns typed "
            "responses and documents itself."
        ),
        "category": "Technology",
        "is_published": True,
    },
    {
        "title": "Why Password Hashing Matters",
        "slug": "why-password-hashing-matters",
        "excerpt": "Slow hashes buy time when a database leaks.",
        "content": (
            "Storing plaintext passwords turns every database leak into an account "
            "takeover. Salted, deliberately slow hashes such as bcrypt make each guess "
            "expensive, and the cost factor can be raised as hardware gets faster."
        ),
        "category": "Technology",
        "is_published": True,
    },
    {
        "title": "A Weekend in Lisbon",
        "slug": "a-weekend-in-lisbon",
        "excerpt": "Trams, tiles and custard tarts.",
        "content": (
            "Lisbon is best explored on foot, with a tram ride when the hills win. "
            "Start in Alfama early in the morning, stop for coffee in a miradouro and "
            "finish the day with grilled sardines near the river."
        ),
        "category": "Travel",
        "is_published": True,
    },
    {
        "title": "Five Pantry Staples for Quick Dinners",
        "slug": "five-pantry-staples-for-quick-dinners",
        "excerpt": "Keep these around and dinner is never far away.",
        "content": (
            "Canned tomatoes, chickpeas, dried pasta, rice and a good olive oil cover "
            "most weeknight dinners. Add whatever vegetables are in the fridge and a "
            "handful of herbs and you are done in twenty minutes."
        ),
        "category": "Food",
        "is_published": True,
    },
    {
        "title": "Building a Morning Routine That Sticks",
        "slug": "building-a-morning-routine-that-sticks",
        "excerpt": "Small habits, stacked.",
        "content": (
            "Routines fail when they start too big. Pick one habit, attach it to "
            "something you already do every morning and only add the next one once the "
            "first feels automatic."
        ),
        "category": "Lifestyle",
        "is_published": False,
    },
]

"""Fixed fixture used by "Generate demo data"."""

from copy import deepcopy

DEMO_PROJECTS = [
    {"name": "E-commerce Platform", "archived": False},
    {"name": "Mobile App", "archived": False},
    {"name": "AI Chatbot", "archived": False},
    {"name": "Portfolio Website", "archived": True},
    {"name": "Blog System", "archived": False},
]

DEMO_ENTRIES = [
    {
        "id": "demo1",
        "date": "2/14/2026",
        "accomplished": [
            "Fixed user authentication bug",
            "Implemented payment gateway integration",
            "Updated API documentation",
        ],
        "next": ["Add email notifications", "Test checkout flow", "Deploy to staging"],
        "blockers": ["Waiting on payment provider API keys"],
        "projects": ["E-commerce Platform"],
        "notes": "Good progress today. Payment integration was trickier than expected.",
    },
    {
        "id": "demo2",
        "date": "2/13/2026",
        "accomplished": [
            "Designed new home screen",
            "Set up navigation structure",
            "Integrated push notifications",
        ],
        "next": ["Build profile screen", "Add offline mode", "Test on iOS"],
        "blockers": [],
        "projects": ["Mobile App"],
        "notes": "Design looks great, team loved the mockups!",
    },
    {
        "id": "demo3",
        "date": "2/12/2026",
        "accomplished": [
            "Trained model on new dataset",
            "Improved response accuracy by 15%",
            "Added context awareness",
        ],
        "next": ["Fine-tune on domain data", "Add multi-language support", "Optimize inference speed"],
        "blockers": ["GPU quota running low"],
        "projects": ["AI Chatbot"],
        "notes": "Model performance exceeded expectations!",
    },
    {
        "id": "demo4",
        "date": "2/11/2026",
        "accomplished": ["Refactored blog component", "Added markdown support", "Set up CI/CD pipeline"],
        "next": ["Add comment system", "Implement SEO optimization"],
        "blockers": [],
        "projects": ["Blog System"],
        "notes": "Pipeline is working smoothly now.",
    },
    {
        "id": "demo5",
        "date": "2/10/2026",
        "accomplished": ["Brainstormed new features", "Reviewed competitor apps", "Sketched wireframes"],
        "next": ["Build shopping cart", "Add product search"],
        "blockers": ["Need designer feedback"],
        "projects": ["E-commerce Platform", "Mobile App"],
        "notes": "Planning session was very productive.",
    },
]

DEMO_IDEAS = [
    {
        "id": "idea1",
        "title": "Add Dark Mode",
        "description": "Users have been requesting a dark mode option. Should be a toggle in settings that persists across sessions.",
        "projects": ["E-commerce Platform", "Mobile App"],
        "date": "2/15/2026",
    },
    {
        "id": "idea2",
        "title": "Voice Commands",
        "description": "Integrate voice recognition to allow hands-free interaction with the chatbot. Could be a premium feature.",
        "projects": ["AI Chatbot"],
        "date": "2/14/2026",
    },
    {
        "id": "idea3",
        "title": "Weekly Newsletter",
        "description": "Auto-generate a newsletter from blog posts. Send to subscribers every Sunday.",
        "projects": ["Blog System"],
        "date": "2/13/2026",
    },
    {
        "id": "idea4",
        "title": "Referral Program",
        "description": "Give users credits for referring friends. Track referrals and automate rewards.",
        "projects": ["E-commerce Platform"],
        "date": "2/12/2026",
    },
    {
        "id": "idea5",
        "title": "Analytics Dashboard",
        "description": "Build admin dashboard to track user behavior, sales, and engagement metrics across all projects.",
        "projects": [],
        "date": "2/11/2026",
    },
]


def demo_data():
    """Fresh copies of the fixture as (projects, entries, ideas)."""
    return deepcopy(DEMO_PROJECTS), deepcopy(DEMO_ENTRIES), deepcopy(DEMO_IDEAS)

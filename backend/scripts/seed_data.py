"""Seed the database with an admin account and sample portfolio content."""
import argparse
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime
from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.user import User
from app.services import (
    blog_service,
    category_service,
    project_service,
    skill_service,
    user_service,
    video_service,
)

ADMIN_USERNAME = os.getenv("SEED_ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "admin123")

SKILLS = [
    ("HTML/CSS", 95, "frontend"), ("JavaScript", 90, "frontend"), ("React", 85, "frontend"),
    ("TypeScript", 80, "frontend"), ("Tailwind CSS", 90, "frontend"),
    ("Python", 90, "backend"), ("FastAPI", 85, "backend"), ("Node.js", 80, "backend"),
    ("PostgreSQL", 80, "database"), ("SQLite", 75, "database"),
    ("Git", 90, "tools"), ("Docker", 75, "tools"),
    ("AWS", 65, "cloud"),
]

PROJECTS = [
    {
        "title": "E-commerce Dashboard",
        "description": "Admin dashboard for e-commerce platforms with sales analytics and inventory management",
        "image_url": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?auto=format&fit=crop&w=1000&q=80",
        "technologies": ["React", "Python", "PostgreSQL"],
        "project_url": "https://project1.example.com",
        "github_url": "https://github.com/example/project1",
        "featured": True,
    },
    {
        "title": "Real-time Chat Application",
        "description": "Messaging application with private chats, group channels and file sharing",
        "image_url": "https://images.unsplash.com/photo-1531482615713-2afd69097998?auto=format&fit=crop&w=1000&q=80",
        "technologies": ["WebSockets", "React", "Redis"],
        "github_url": "https://github.com/example/project2",
        "featured": True,
    },
    {
        "title": "Task Management System",
        "description": "Collaborative task manager with kanban boards, progress tracking and team collaboration",
        "image_url": "https://images.unsplash.com/photo-1506784365847-bbad939e9335?auto=format&fit=crop&w=1000&q=80",
        "technologies": ["TypeScript", "FastAPI", "SQLite"],
        "featured": False,
    },
]

VIDEOS = [
    {"title": "Building a React App from Scratch", "video_id": "dQw4w9WgXcQ", "views": 1250,
     "published_at": datetime(2023, 1, 10), "featured": True, "order": 1},
    {"title": "REST API Tutorial", "video_id": "QH2-TGUlwu4", "views": 980,
     "published_at": datetime(2023, 2, 15), "featured": True, "order": 2},
    {"title": "Database Crash Course", "video_id": "jNQXAC9IVRw", "views": 740,
     "published_at": datetime(2023, 3, 20), "featured": False, "order": 3},
]


def reset():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("Dropped and recreated all tables.")


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(User).count() > 0:
            print("Database already seeded. Skipping.")
            return

        admin = user_service.create_user(db, {
            "username": ADMIN_USERNAME,
            "password": ADMIN_PASSWORD,
            "name": "Admin User",
            "email": "admin@example.com",
            "role": "admin",
        })

        web = category_service.create_category(db, {"name": "Web Development", "slug": "web-development"})
        category_service.create_category(db, {"name": "Mobile Development", "slug": "mobile-development"})

        order_by_category = {}
        for name, percentage, category in SKILLS:
            order_by_category[category] = order_by_category.get(category, 0) + 1
            skill_service.create_skill(db, {
                "name": name,
                "percentage": percentage,
                "category": category,
                "order": order_by_category[category],
            })

        for project in PROJECTS:
            project_service.create_project(db, {**project, "author_id": admin.id})

        blog_service.create_blog(db, {
            "title": "Getting Started with FastAPI",
            "slug": "getting-started-with-fastapi",
            "content": "<h1>Getting Started with FastAPI</h1><p>Routers, dependencies and Pydantic models.</p>",
            "excerpt": "A tour of routers, dependencies and Pydantic models.",
            "image_url": "https://images.unsplash.com/photo-1555066931-4365d14bab8c?auto=format&fit=crop&w=1000&q=80",
            "category_id": web.id,
            "author_id": admin.id,
            "published": True,
        })
        blog_service.create_blog(db, {
            "title": "Designing REST APIs",
            "slug": "designing-rest-apis",
            "content": "<h1>Designing REST APIs</h1><p>Resources, status codes and validation errors.</p>",
            "excerpt": "Resources, status codes and validation errors.",
            "image_url": "https://images.unsplash.com/photo-1517694712202-14dd9538aa97?auto=format&fit=crop&w=1000&q=80",
            "category_id": web.id,
            "author_id": admin.id,
            "published": False,
        })

        for video in VIDEOS:
            video_service.create_video(db, video)

        print("Seed data created successfully.")
        print(f"  Admin: {ADMIN_USERNAME} / {ADMIN_PASSWORD}")
    except Exception as e:
        db.rollback()
        print(f"Error seeding data: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed portfolio sample data")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    args = parser.parse_args()
    if args.reset:
        reset()
    seed()

# portfolio/content.py · everything the page says
# ----------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

NAME = "Akshar Bhakare"
FIRST_NAME = "Akshar"
ROLE = "Full-Stack Developer"
TAGLINE = (
    "I craft exceptional digital experiences with modern technologies, "
    "turning ideas into scalable web applications that make a difference."
)
AVAILABILITY = "Available for work"
EMAIL = "aksharbhakare@gmail.com"

ABOUT: List[str] = [
    "I'm a 3rd yr CSE student @DYPDPU...",
    "I love to code and build websites and vibe code...",
    "I've been focusing on Next.js and integrating AI tools to accelerate development...",
]

PROJECTS_BLURB = "A selection of interactive builds. Open a card for details, tech, and links."
CONTACT_BLURB = "Have an idea or opportunity? I'd love to hear about it."

LOCATION_LINES: List[str] = [
    "📍 Based in Pune, Maharashtra",
    "💼 Available for freelance projects",
    "🎓 Open to internship opportunities",
]

# Anchor ids, in page order; nav labels skip the hero.
SECTION_IDS = {"home": "home", "about": "about", "projects": "projects", "contact": "contact"}
NAV_LINKS: List[Tuple[str, str]] = [("About", "about"), ("Projects", "projects"), ("Contact", "contact")]


@dataclass(frozen=True)
class Stat:
    label: str
    value: str


@dataclass(frozen=True)
class Tech:
    name: str
    icon: str
    level: int  # 0-100, radar only


@dataclass(frozen=True)
class Project:
    name: str
    description: str
    tech: Tuple[str, ...]
    image: str
    demo: str = "#"
    github: str = "#"

    @property
    def slug(self) -> str:
        return self.name.lower().replace(" ", "-")


@dataclass(frozen=True)
class ContactLink:
    label: str
    href: str
    kind: str = "web"  # mail | linkedin | x | web


STATS: List[Stat] = [
    Stat("Projects Shipped", "12+"),
    Stat("Hackathons", "3"),
    Stat("Open-source PRs", "15+"),
]

TECH_STACK: List[Tech] = [
    Tech("JavaScript", "javascript.png", 85),
    Tech("TypeScript", "typescript.png", 75),
    Tech("React", "react.png", 85),
    Tech("Next.js", "nextjs.png", 80),
    Tech("Node.js", "nodejs.png", 70),
    Tech("MongoDB", "mongodb.png", 65),
    Tech("Postgres", "postgres.png", 55),
    Tech("Prisma", "prisma.png", 55),
    Tech("Tailwind CSS", "tailwind.png", 90),
    Tech("Framer Motion", "framer-motion.png", 70),
    Tech("Docker", "docker.png", 45),
    Tech("Git", "git.png", 80),
]

PROJECTS: List[Project] = [
    Project(
        name="PassOP",
        description="Simple password manager with Auth.js, encrypted storage, and vault UI.",
        tech=("Next.js", "Tailwind", "Auth.js", "MongoDB"),
        image="passop-screenshot.png",
    ),
    Project(
        name="DevNotes",
        description="Markdown notebook with sync, search, and offline-first caching.",
        tech=("React", "Vite", "IndexedDB", "PWA"),
        image="devnotes-screenshot.png",
    ),
    Project(
        name="InsightBoard",
        description="Analytics dashboard with role-based auth and real-time charts.",
        tech=("Next.js", "Prisma", "Postgres", "WebSockets"),
        image="insightboard-screenshot.png",
    ),
]

CONTACT_LINKS: List[ContactLink] = [
    ContactLink(EMAIL, f"mailto:{EMAIL}", "mail"),
    ContactLink("LinkedIn", "https://www.linkedin.com/in/akshar-bhakare-ba6055292", "linkedin"),
    ContactLink("X", "https://x.com/aksharbhakare", "x"),
]

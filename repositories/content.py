# ============================================================================
# CONTENT REPOSITORY
# ============================================================================
# Hardcoded gallery data backing the mock content endpoints. Records keep the
# raw shapes the site has always served; services.content_normalization maps
# them onto ContentItem.
#
# ============================================================================

import copy
from typing import Any, Dict, List

from schemas.imports import Section


CERTIFICATIONS: List[Dict[str, Any]] = [
    {
        "id": "certified-react-developer",
        "title": "Certified React Developer",
        "issuer": "React Academy",
        "date": "2023",
        "type": "Frontend",
        "description": "Advanced certification in React development.",
    },
    {
        "id": "typescript-mastery",
        "title": "TypeScript Mastery",
        "issuer": "Code Institute",
        "date": "2022",
        "type": "Language",
        "description": "Comprehensive training in TypeScript.",
    },
    {
        "id": "python-data-analysis",
        "title": "Python for Data Analysis",
        "org": "Data Science Guild",
        "date": "2024",
        "type": "Data",
        "credentialUrl": "https://example.com/credentials/python-data-analysis",
    },
]

EXPERIENCE: List[Dict[str, Any]] = [
    {
        "period": "2020 - Present",
        "title": "Senior Developer",
        "company": "TechCorp",
        "description": "Leading the development team and managing projects.",
        "skills": ["React", "TypeScript", "GSAP"],
    },
    {
        "period": "2018 - 2020",
        "title": "Frontend Developer",
        "company": "Webify",
        "description": "Developed user interfaces and optimized performance.",
        "skills": ["JavaScript", "CSS", "HTML"],
    },
]

PROJECTS: List[Dict[str, Any]] = [
    {
        "name": "Portfolio Website",
        "description": "A personal portfolio website showcasing my projects and skills.",
        "technologies": ["React", "TypeScript", "Tailwind CSS"],
        "link": "https://myportfolio.com",
    },
    {
        "name": "E-commerce Platform",
        "description": "An online platform for buying and selling products.",
        "technologies": ["Next.js", "Node.js", "MongoDB"],
        "link": "https://ecommerce.com",
    },
]

SKILL_GROUPS: List[Dict[str, Any]] = [
    {
        "id": "frontend-galaxy",
        "title": "Frontend Galaxy",
        "category": "frontend",
        "skills": [
            {"name": "HTML5", "level": 95},
            {"name": "CSS3", "level": 92},
            {"name": "JavaScript", "level": 85},
            {"name": "React", "level": 85},
            {"name": "Bootstrap", "level": 90},
            {"name": "Tailwind", "level": 88},
        ],
    },
    {
        "id": "backend-galaxy",
        "title": "Backend Galaxy",
        "category": "backend",
        "skills": [
            {"name": "Python", "level": 90},
            {"name": "Java", "level": 85},
            {"name": "C++", "level": 80},
            {"name": "C", "level": 75},
            {"name": "Node.js", "level": 70},
            {"name": "Express", "level": 75},
        ],
    },
    {
        "id": "framework-nebula",
        "title": "Framework Nebula",
        "category": "framework",
        "skills": [
            {"name": "Django", "level": 75},
            {"name": "Next.js", "level": 80},
            {"name": "MySQL", "level": 80},
            {"name": "PostgreSQL", "level": 78},
            {"name": "MongoDB", "level": 70},
            {"name": "Redux", "level": 75},
        ],
    },
    {
        "id": "data-constellation",
        "title": "Data Constellation",
        "category": "data",
        "skills": [
            {"name": "Gen AI", "level": 70},
            {"name": "Tableau", "level": 75},
            {"name": "Power BI", "level": 70},
            {"name": "Excel", "level": 85},
            {"name": "Pandas", "level": 75},
            {"name": "NumPy", "level": 72},
        ],
    },
]

_RECORDS: Dict[Section, List[Dict[str, Any]]] = {
    Section.CERTIFICATIONS: CERTIFICATIONS,
    Section.EXPERIENCE: EXPERIENCE,
    Section.PROJECTS: PROJECTS,
    Section.SKILLS: SKILL_GROUPS,
}


def get_raw_records(section: Section) -> List[Dict[str, Any]]:
    """Returns a copy of the hardcoded records for a section."""
    return copy.deepcopy(_RECORDS[Section(section)])

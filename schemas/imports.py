from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class ItemKind(str, Enum):
    CERTIFICATION = "certification"
    EXPERIENCE = "experience"
    PROJECT = "project"
    SKILL_GROUP = "skill_group"


class SkillCategory(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FRAMEWORK = "framework"
    DATA = "data"


class Section(str, Enum):
    CERTIFICATIONS = "certifications"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    SKILLS = "skills"

# tmdbmatch/people.py
from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .util.text import contains_ignore_case, equals_ignore_case


class PersonRole(str, Enum):
    DIRECTOR = "Director"
    PRODUCER = "Producer"
    WRITER = "Writer"
    UNKNOWN = ""


# Crew roles worth keeping from a TMDb credits payload
WANTED_CREW_TYPES: Tuple[PersonRole, ...] = (
    PersonRole.DIRECTOR,
    PersonRole.WRITER,
    PersonRole.PRODUCER,
)


def map_crew_to_person_type(department: Optional[str], job: Optional[str]) -> PersonRole:
    """
    Map a TMDb crew department/job pair onto a PersonRole.

    Only the production department yields directors and producers; a job
    mentioning both ("Director / Producer") resolves to Director.
    """
    department = department or ""
    job = job or ""
    if equals_ignore_case(department, "production") and contains_ignore_case(job, "director"):
        return PersonRole.DIRECTOR
    if equals_ignore_case(department, "production") and contains_ignore_case(job, "producer"):
        return PersonRole.PRODUCER
    if equals_ignore_case(department, "writing"):
        return PersonRole.WRITER
    return PersonRole.UNKNOWN


def wanted_crew(crew: Iterable[Dict[str, Any]]) -> List[Tuple[str, PersonRole]]:
    out: List[Tuple[str, PersonRole]] = []
    for c in crew or []:
        if not isinstance(c, dict):
            continue
        nm = c.get("name")
        if not nm:
            continue
        role = map_crew_to_person_type(c.get("department"), c.get("job"))
        if role in WANTED_CREW_TYPES:
            out.append((nm, role))
    return out

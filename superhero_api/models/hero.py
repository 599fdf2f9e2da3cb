"""
Hero Data Models

Read-only catalog entries seeded from the superhero dataset.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Hero:
    """A hero catalog entry. ``id`` is the stable external identifier."""
    id: Optional[str]
    name: Optional[str]
    powerstats: Dict[str, Any] = field(default_factory=dict)
    mongo_id: Optional[str] = None
    response: Optional[str] = None
    # Descriptive groups are passed through untouched
    biography: Dict[str, Any] = field(default_factory=dict)
    appearance: Dict[str, Any] = field(default_factory=dict)
    work: Dict[str, Any] = field(default_factory=dict)
    connections: Dict[str, Any] = field(default_factory=dict)
    image: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> 'Hero':
        mongo_id = doc.get('_id')
        hero_id = doc.get('id')
        return cls(
            id=str(hero_id) if hero_id is not None else None,
            name=doc.get('name'),
            powerstats=dict(doc.get('powerstats') or {}),
            mongo_id=str(mongo_id) if mongo_id is not None else None,
            response=doc.get('response'),
            biography=dict(doc.get('biography') or {}),
            appearance=dict(doc.get('appearance') or {}),
            work=dict(doc.get('work') or {}),
            connections=dict(doc.get('connections') or {}),
            image=dict(doc.get('image') or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the API shape."""
        return {
            '_id': self.mongo_id,
            'response': self.response,
            'id': self.id,
            'name': self.name,
            'powerstats': self.powerstats,
            'biography': self.biography,
            'appearance': self.appearance,
            'work': self.work,
            'connections': self.connections,
            'image': self.image,
        }

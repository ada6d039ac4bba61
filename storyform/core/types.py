"""
Centralized domain types for story configuration.

Mutable building blocks owned by a ConfigurationState live here; the
immutable request models are in ``storyform.models``.
"""

from typing import Iterator, Union

from ..models.enums import Skill
from ..models.requests import SkillSelection
from .errors import InvalidFlagValue, UnknownSkill


class SkillFlags:
    """The five skill flags, always all present, all off by default."""

    __slots__ = ("_flags",)

    def __init__(self):
        self._flags: dict[Skill, bool] = {skill: False for skill in Skill}

    @staticmethod
    def resolve(name: Union[Skill, str]) -> Skill:
        """Map a skill name to its enum member.

        Raises:
            UnknownSkill: if the name is not one of the five skills
        """
        try:
            return Skill(name)
        except ValueError:
            raise UnknownSkill(name) from None

    def set(self, name: Union[Skill, str], enabled: bool) -> None:
        skill = self.resolve(name)
        if not isinstance(enabled, bool):
            raise InvalidFlagValue(skill.value, enabled)
        self._flags[skill] = enabled

    def get(self, name: Union[Skill, str]) -> bool:
        return self._flags[self.resolve(name)]

    def __getitem__(self, name: Union[Skill, str]) -> bool:
        return self.get(name)

    def __iter__(self) -> Iterator[Skill]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def as_dict(self) -> dict[str, bool]:
        return {skill.value: enabled for skill, enabled in self._flags.items()}

    def snapshot(self) -> SkillSelection:
        return SkillSelection(**self.as_dict())

    def clear(self) -> None:
        for skill in self._flags:
            self._flags[skill] = False

    def __repr__(self) -> str:
        return f"SkillFlags({self.as_dict()!r})"

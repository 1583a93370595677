from typing import Dict, List, Tuple, Union

from pydantic import BaseModel, model_validator

from questlog.core.errors import UnknownGoalKind
from questlog.models.goal import GOAL_MODELS, Goal, GoalKind


# Positional creation parameters per kind, mapped onto model fields.
# Negative takes the penalty as a positive number; the model stores it negative.
CREATE_PARAMS: Dict[GoalKind, Tuple[str, ...]] = {
    GoalKind.simple: ("points",),
    GoalKind.eternal: ("points",),
    GoalKind.checklist: ("points", "target", "bonus"),
    GoalKind.negative: ("points",),
    GoalKind.progress: ("points", "target", "bonus"),
}

_KINDS_BY_NAME = {k.value.lower(): k for k in GoalKind}


def resolve_kind(kind: Union[str, GoalKind]) -> GoalKind:
    """Map a kind tag (any case) or enum member to a GoalKind."""
    if isinstance(kind, GoalKind):
        return kind
    found = _KINDS_BY_NAME.get(str(kind).strip().lower())
    if found is None:
        raise UnknownGoalKind(kind)
    return found


class GoalCreate(BaseModel):
    """Validated request to create one goal."""

    kind: GoalKind
    name: str
    description: str = ""
    params: List[int] = []

    @model_validator(mode="after")
    def _check_arity(self):
        expected = CREATE_PARAMS[self.kind]
        if len(self.params) != len(expected):
            raise ValueError(
                f"{self.kind.value} goals take {len(expected)} parameter(s) "
                f"({', '.join(expected)}), got {len(self.params)}"
            )
        return self

    def build(self) -> Goal:
        fields = dict(zip(CREATE_PARAMS[self.kind], self.params))
        return GOAL_MODELS[self.kind](name=self.name, description=self.description, **fields)

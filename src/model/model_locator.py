from dataclasses import dataclass, field

from model.models import BallModel, PlayerModel, PlayStateModel, StageModel


@dataclass
class ModelLocator:
    """Single access point for every model of one game."""

    player1_model: PlayerModel = field(default_factory=PlayerModel)
    player2_model: PlayerModel = field(default_factory=PlayerModel)
    ball_model: BallModel = field(default_factory=BallModel)
    stage_model: StageModel = field(default_factory=StageModel)
    play_state_model: PlayStateModel = field(default_factory=PlayStateModel)

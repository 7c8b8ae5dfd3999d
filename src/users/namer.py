"""Text shown for a player on the rendered board."""

from src.core.models import PlayerModel
from src.users.light_user_api import LightUserGetterSync

ANONYMOUS = "Anonymous"


def player_text(
    player: PlayerModel, light_user: LightUserGetterSync, with_rating: bool = False
) -> str:
    """e.g. 'GM Magnus (2850)', 'Newbie (1500?)', 'Stockfish level 8', 'Anonymous'.

    Only reads users already loaded by LightUserApi.preload_many.
    """
    if player.ai_level is not None:
        return f"Stockfish level {player.ai_level}"

    user = light_user(player.user_id) if player.user_id else None
    if user is None:
        return player.name or ANONYMOUS

    if with_rating and player.rating is not None:
        provisional = "?" if player.provisional else ""
        return f"{user.title_name} ({player.rating}{provisional})"
    return user.title_name

from .emotion_prompt import EMOTION_SYSTEM_PROMPT
from .schedule_prompt import schedule_prompt_template

__all__ = ["EMOTION_SYSTEM_PROMPT", "schedule_prompt_template"]

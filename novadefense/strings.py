from __future__ import annotations

from typing import Dict

DEFAULT_LANGUAGE = "zh"

STRINGS: Dict[str, Dict[str, str]] = {
    "zh": {
        "title": "Tina新星防御",
        "start": "开始游戏",
        "win": "防御成功！",
        "lose": "防御失败",
        "score": "得分",
        "win_score": "目标得分",
        "ammo": "弹药",
        "restart": "再玩一次",
        "instructions": "点击屏幕发射拦截导弹。预判火箭落点，利用爆炸范围摧毁敌人。",
        "prompt": "按空格键开始",
    },
    "en": {
        "title": "Tina Nova Defense",
        "start": "Start Game",
        "win": "Defense Successful!",
        "lose": "Defense Failed",
        "score": "Score",
        "win_score": "Target Score",
        "ammo": "Ammo",
        "restart": "Play Again",
        "instructions": "Click screen to fire interceptors. Predict rocket paths and use explosion radius to destroy enemies.",
        "prompt": "Press Space to start",
    },
}

TOWER_LABELS = ("L-TOWER", "C-TOWER", "R-TOWER")


def toggle_language(language: str) -> str:
    return "en" if language == "zh" else "zh"


def text(language: str, key: str) -> str:
    return STRINGS.get(language, STRINGS[DEFAULT_LANGUAGE])[key]

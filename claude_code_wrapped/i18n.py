"""Translations for Claude Code Wrapped.

Two languages are supported: English ("en") and Simplified Chinese ("zh").
There is no global "current language": every renderer receives ``lang``
as an argument and looks strings up with tr().
"""

import os
from typing import Dict, Mapping, Optional

SUPPORTED_LANGUAGES = ("en", "zh")
DEFAULT_LANGUAGE = "en"

EN: Dict[str, str] = {
    # CLI
    "analyzing": "Analyzing your Claude Code journey...",
    "analysis_complete": "Analysis complete!",
    "generating_html": "Generating HTML report...",
    "html_generated": "HTML report generated!",
    "opening_browser": "Opening report in browser...",
    "report_saved": "Report saved to:",
    "checking_browser": "Checking headless browser availability...",
    "browser_not_available": "Headless browser not available. PNG export requires Playwright with Chromium.",
    "export_hint": "You can still export by opening the HTML and using the Export PNG button.",
    "generating_png": "Generating PNG export...",
    "png_exported": "PNG exported!",
    "png_saved": "PNG saved to:",
    "thank_you": "Thank you for using Claude Code in {year}!",
    "data_not_found": "Claude Code data not found!",
    "expected_location": "Expected location:",
    "install_hint": "Make sure you have Claude Code installed and have used it at least once.",
    "error": "Error: {message}",
    # Stats labels
    "total_sessions": "Total_Sessions",
    "active_days": "Active_Days",
    "peak_messages": "Peak_Messages",
    "tool_calls": "Tool_Calls",
    "total_messages": "total messages",
    "tokens": "TOKENS",
    "primary_model": "Primary Model",
    "level": "LEVEL",
    "cumulative_intelligence": "CUMULATIVE_INTELLIGENCE",
    "activity_distribution": "ACTIVITY_DISTRIBUTION",
    "monthly_activity": "MONTHLY_ACTIVITY",
    "time_zone": "TIME_ZONE: LOCAL",
    "active_registry": "Active_Registry_{year}",
    "total_projects": "Total Projects",
    "total_prompts": "Prompts",
    "longest_streak": "Longest_Streak",
    "current_streak": "Current_Streak",
    "avg_msgs_per_session": "Avg_Msgs/Session",
    "days": "DAYS",
    # Time ranges
    "night": "00:00-08:00",
    "morning": "09:00-12:00",
    "afternoon": "13:00-18:00",
    "evening": "19:00-23:00",
    # Banner and highlights
    "identified": "IDENTIFIED",
    "neural_link_established": "Neural Link Established",
    "marathon_session": "Your {duration} marathon session ({messages} messages) has been archived in the central neural core.",
    "system_recognizes": "The system recognizes your persistence.",
    "terminal_ready": "TERMINAL_READY",
    "sys_ref": "SYS_REF: 0xFF-{year}-RECAP",
    "collaboration_density": "Your collaboration density exceeds standard protocols.",
    "exceeded_protocols": "Total messages exchanged with core intelligence.",
    # HTML
    "overview": "Overview",
    "impact": "Impact",
    "hourly_activity": "Hourly Activity",
    "weekly_pattern": "Weekly Pattern",
    "projects": "Projects",
    "model_usage": "Model Usage",
    "primary": "Primary",
    "cost_estimate": "Cost Estimate",
    "based_on_api_pricing": "Based on API pricing",
    "achievements": "Achievements",
    "total_tokens": "Total Tokens",
    "messages_with_claude": "Total messages exchanged with Claude",
    "export_png": "Export PNG",
    "exporting": "Exporting...",
    "export_failed": "Export failed. Please try again.",
    "marathon": "Marathon {duration}",
    "weekdays": "Mon,Tue,Wed,Thu,Fri,Sat,Sun",
}

ZH: Dict[str, str] = {
    # CLI
    "analyzing": "正在分析你的 Claude Code 之旅...",
    "analysis_complete": "分析完成！",
    "generating_html": "正在生成 HTML 报告...",
    "html_generated": "HTML 报告已生成！",
    "opening_browser": "正在浏览器中打开报告...",
    "report_saved": "报告已保存至:",
    "checking_browser": "正在检查无头浏览器可用性...",
    "browser_not_available": "无头浏览器不可用，PNG 导出需要安装 Playwright 及 Chromium。",
    "export_hint": "你仍可以打开 HTML 并使用 Export PNG 按钮导出。",
    "generating_png": "正在生成 PNG 导出...",
    "png_exported": "PNG 已导出！",
    "png_saved": "PNG 已保存至:",
    "thank_you": "感谢你在 {year} 年使用 Claude Code！",
    "data_not_found": "未找到 Claude Code 数据！",
    "expected_location": "预期位置:",
    "install_hint": "请确保已安装 Claude Code 并至少使用过一次。",
    "error": "错误: {message}",
    # Stats labels
    "total_sessions": "总会话数",
    "active_days": "活跃天数",
    "peak_messages": "单日峰值",
    "tool_calls": "工具调用",
    "total_messages": "条消息交互",
    "tokens": "TOKENS",
    "primary_model": "主力模型",
    "level": "等级",
    "cumulative_intelligence": "累计智能消耗",
    "activity_distribution": "活动时间分布",
    "monthly_activity": "月度活跃",
    "time_zone": "时区: 本地",
    "active_registry": "{year} 项目档案",
    "total_projects": "项目总数",
    "total_prompts": "提示数",
    "longest_streak": "最长连续",
    "current_streak": "当前连续",
    "avg_msgs_per_session": "场均消息",
    "days": "天",
    # Time ranges
    "night": "深夜 00-08",
    "morning": "上午 09-12",
    "afternoon": "下午 13-18",
    "evening": "晚间 19-23",
    # Banner and highlights
    "identified": "身份识别",
    "neural_link_established": "神经链路建立于",
    "marathon_session": "你那场 {duration} 的马拉松会话（{messages} 条消息）已被归档至中央神经核心。",
    "system_recognizes": "系统认可你的坚持。",
    "terminal_ready": "终端就绪",
    "sys_ref": "系统参考: 0xFF-{year}-回顾",
    "collaboration_density": "你的协作强度超越了标准协议。",
    "exceeded_protocols": "与核心智能交换的消息总数。",
    # HTML
    "overview": "概览",
    "impact": "影响力",
    "hourly_activity": "时段分布",
    "weekly_pattern": "每周规律",
    "projects": "项目",
    "model_usage": "模型使用",
    "primary": "主力",
    "cost_estimate": "费用估算",
    "based_on_api_pricing": "基于 API 定价",
    "achievements": "成就",
    "total_tokens": "Token 总数",
    "messages_with_claude": "与 Claude 交换的消息总数",
    "export_png": "导出 PNG",
    "exporting": "导出中...",
    "export_failed": "导出失败，请重试。",
    "marathon": "马拉松 {duration}",
    "weekdays": "周一,周二,周三,周四,周五,周六,周日",
}

TITLES: Dict[str, Dict[str, str]] = {
    "en": {
        "neural_architect": "Neural Architect",
        "prolific_architect": "Prolific Architect",
        "senior_collaborator": "Senior Collaborator",
        "code_artisan": "Code Artisan",
        "digital_craftsman": "Digital Craftsman",
        "code_apprentice": "Code Apprentice",
    },
    "zh": {
        "neural_architect": "神经架构师",
        "prolific_architect": "高产架构师",
        "senior_collaborator": "资深协作者",
        "code_artisan": "代码工匠",
        "digital_craftsman": "数字匠人",
        "code_apprentice": "代码学徒",
    },
}

LEVELS: Dict[str, Dict[str, str]] = {
    "en": {
        "legendary": "LEGENDARY",
        "master": "MASTER",
        "expert": "EXPERT",
        "advanced": "ADVANCED",
        "intermediate": "INTERMEDIATE",
        "novice": "NOVICE",
    },
    "zh": {
        "legendary": "传奇",
        "master": "大师",
        "expert": "专家",
        "advanced": "进阶",
        "intermediate": "中级",
        "novice": "新手",
    },
}

ACHIEVEMENT_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "10K_MESSAGES": "10K Messages",
        "1K_MESSAGES": "1K Messages",
        "500_SESSIONS": "500 Sessions",
        "100_SESSIONS": "100 Sessions",
        "MONTHLY_ACTIVE": "Monthly Active",
        "WEEKLY_ACTIVE": "Weekly Active",
        "WEEK_STREAK": "7-Day Streak",
        "3_DAY_STREAK": "3-Day Streak",
        "TOOL_MASTER": "Tool Master",
        "TOOL_USER": "Tool User",
        "MARATHON_SESSION": "Marathon Session",
        "LONG_SESSION": "Long Session",
        "100M_TOKENS": "100M Tokens",
        "10M_TOKENS": "10M Tokens",
    },
    "zh": {
        "10K_MESSAGES": "万条消息",
        "1K_MESSAGES": "千条消息",
        "500_SESSIONS": "500 场会话",
        "100_SESSIONS": "100 场会话",
        "MONTHLY_ACTIVE": "月度活跃",
        "WEEKLY_ACTIVE": "周度活跃",
        "WEEK_STREAK": "连续 7 天",
        "3_DAY_STREAK": "连续 3 天",
        "TOOL_MASTER": "工具大师",
        "TOOL_USER": "工具达人",
        "MARATHON_SESSION": "马拉松会话",
        "LONG_SESSION": "长会话",
        "100M_TOKENS": "一亿 Token",
        "10M_TOKENS": "千万 Token",
    },
}

TRANSLATIONS: Dict[str, Dict[str, str]] = {"en": EN, "zh": ZH}


def detect_language(environ: Optional[Mapping[str, str]] = None) -> str:
    """Detect the display language from LANG / LC_ALL / LC_MESSAGES.

    Example:
        >>> detect_language({"LANG": "zh_CN.UTF-8"})
        'zh'
        >>> detect_language({})
        'en'
    """
    environ = os.environ if environ is None else environ
    locale = environ.get("LANG") or environ.get("LC_ALL") or environ.get("LC_MESSAGES") or ""
    if locale.lower().startswith("zh"):
        return "zh"
    return DEFAULT_LANGUAGE


def resolve_language(lang: Optional[str]) -> str:
    """Return ``lang`` if supported, otherwise the detected language."""
    if lang in SUPPORTED_LANGUAGES:
        return lang
    return detect_language()


def get_translations(lang: str) -> Dict[str, str]:
    """Get the string table for a language (English for unknown codes)."""
    return TRANSLATIONS.get(lang, EN)


def tr(lang: str, key: str, **params: object) -> str:
    """Look up a string and fill in ``{name}`` placeholders.

    Unknown keys are returned as-is.

    Example:
        >>> tr("en", "thank_you", year=2025)
        'Thank you for using Claude Code in 2025!'
    """
    text = get_translations(lang).get(key, key)
    for name, value in params.items():
        text = text.replace("{" + name + "}", str(value))
    return text


def title_label(lang: str, key: str) -> str:
    """Translate a user title key (e.g. "code_artisan")."""
    return TITLES.get(lang, TITLES["en"]).get(key, key)


def level_label(lang: str, key: str) -> str:
    """Translate a user level key (e.g. "legendary")."""
    return LEVELS.get(lang, LEVELS["en"]).get(key.lower(), key)


def achievement_label(lang: str, tag: str) -> str:
    """Translate an achievement tag (e.g. "WEEK_STREAK")."""
    return ACHIEVEMENT_LABELS.get(lang, ACHIEVEMENT_LABELS["en"]).get(tag, tag)

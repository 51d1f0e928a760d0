import logging

# Project logger, tuned through logging_config
logger = logging.getLogger("sportify")


def log_section(title: str) -> None:
    """
    Log a top-level section header, e.g. one per assembled session.
    """
    logger.info("=== %s ===", title)


def log_info(message: str) -> None:
    logger.info("%s", message)


def log_step(message: str) -> None:
    """
    Action step / ongoing work.
    """
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """
    Non-fatal problem, the request keeps going.
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    logger.error("❌ %s", message)


def log_progress(
    current: int,
    total: int,
    prefix: str = "",
) -> None:
    """
    Simple progress logging.

    Example:
      log_progress(2, 4, prefix="Saved tracks pages")
      -> "Saved tracks pages 2/4 (50.0%)"
    """
    if total <= 0:
        total = 1

    fraction = max(0.0, min(1.0, current / total))
    percent = fraction * 100

    if prefix:
        logger.info("%s %d/%d (%.1f%%)", prefix, current, total, percent)
    else:
        logger.info("%d/%d (%.1f%%)", current, total, percent)


def format_duration(seconds: float) -> str:
    """
    Compact minutes/seconds rendering for session logs.

      format_duration(840)  -> "14m00s"
      format_duration(59.6) -> "0m59s"
    """
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes}m{secs:02d}s"

#!/usr/bin/env python3
"""Basic usage example"""

from context_logger import LoggerBuilder, LogLevel

def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_console(colored=True)
        .with_file("logs/example.jsonl")
        .with_database("sqlite:///logs/example.db", "app_logs")
        .with_context({"service": "example"})
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started", data={"pid": 1234})
    logger.update_context({"request_id": "abc-123"})
    logger.warn("Slow response", data={"elapsed_ms": 840})

    try:
        1 / 0
    except ZeroDivisionError as exc:
        logger.error("Computation failed", error=exc)

    logger.clear_context()
    logger.info("Done")

    # Flush and close
    logger.close()

if __name__ == "__main__":
    main()

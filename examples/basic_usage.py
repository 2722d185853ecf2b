#!/usr/bin/env python3
"""Basic usage example"""

import log_any
from log_any import get_logger
from log_any.formatters import JSONFormatter

# Library side: get a logger once, log freely. Nothing is written yet.
log = get_logger("example.library")


def library_call(items):
    log.debugf("called with %d items: %s", len(items), items)
    if log.is_trace():
        log.trace("expensive dump:", repr(items))
    log.info("processed", len(items), "items", batch="a1")


def main():
    library_call([1, 2, 3])  # discarded: no adapter bound

    # Application side: choose where logs go
    log_any.set_adapter("Stderr", log_level="debug", colored=True)
    log_any.set_adapter(
        "File",
        category="example.library",
        path="logs/example.jsonl",
        formatter=JSONFormatter(),
    )

    library_call([4, 5, 6])

    with log_any.temporary_adapter("Capture", category="example") as binding:
        library_call([7])
        print(binding.adapter_for("example.library").messages)

    log_any.get_manager().shutdown()


if __name__ == "__main__":
    main()

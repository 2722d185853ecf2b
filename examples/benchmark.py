#!/usr/bin/env python3
"""Compare an unconditional trace call with a level check"""

from log_any.bench import LOG_ANY_SCENARIO, format_results, run_scenario


def main():
    results = run_scenario(LOG_ANY_SCENARIO, repeat=3, include=["log_trace", "if_trace"])
    for row in format_results(results):
        print(f"{row['name']:12} {row['rate']:>14,.0f}/s  {row['vs_slowest']:.2f}x")


if __name__ == "__main__":
    main()

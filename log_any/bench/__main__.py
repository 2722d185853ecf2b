from log_any.bench.cli import main

main()

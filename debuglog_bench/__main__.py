from debuglog_bench.main import main

main()

COLUMNS = [
    "Apps",
    "Version",
    "Pubs",
    "Datasets",
    "NTAX",
    "Character_counts",
    "Alignment_counts",
    "Site_counts",
    "Datatype",
    "Analyses",
    "Platform",
    "OS_name",
    "CPU",
    "Benchmark_dates",
    "Latest_bench",
    "Execution_time",
    "RAM_usage_kb",
    "Percent_CPU_usage",
    "Execution_time_secs",
    "RAM_usage_Mb",
]

LATEST_BENCH = "TRUE"

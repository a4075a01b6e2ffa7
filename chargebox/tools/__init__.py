from chargebox.tools.profiler import profile_time_and_memory

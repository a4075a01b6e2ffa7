import time
import psutil
import functools
import gc

def profile_time_and_memory(func=None, *, verbose: int = 1):
    """
    Decorator: measure wall time and CPU RSS delta of a call.

    The last report is attached to the wrapper as `.last_report`
    ({'name', 'seconds', 'rss_before_mb', 'rss_after_mb', 'rss_delta_mb'}).
    Usable bare (`@profile_time_and_memory`) or configured
    (`@profile_time_and_memory(verbose=0)`).
    """
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            process = psutil.Process()

            # CPU before
            cpu_before = process.memory_info().rss / (1024 ** 2)  # MB

            t0 = time.perf_counter()
            result = fn(*args, **kwargs)
            t1 = time.perf_counter()

            # CPU after (post-GC to reduce noise)
            gc.collect()
            cpu_after = process.memory_info().rss / (1024 ** 2)
            cpu_delta = cpu_after - cpu_before

            wrapper.last_report = {
                "name": fn.__name__,
                "seconds": t1 - t0,
                "rss_before_mb": cpu_before,
                "rss_after_mb": cpu_after,
                "rss_delta_mb": cpu_delta,
            }

            if verbose:
                print(f"\nProfiling report for `{fn.__name__}`:")
                print(f"  Time elapsed: {t1 - t0:.4f} sec")
                print(f"  CPU RSS change: {cpu_delta:+.2f} MB (current {cpu_after:.2f} MB)")
                print()
            return result
        wrapper.last_report = None
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator

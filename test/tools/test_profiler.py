# Path settings
import os, sys
#===============================#
# Get the directory where the script is located
PATH = os.path.dirname(os.path.abspath(__file__))
# Get the parent directory of the current directory
PATH = os.path.abspath(os.path.join(PATH, '..', '..'))
sys.path.insert(0, PATH)
#===============================#

from chargebox.tools import profile_time_and_memory

def test_bare_decorator_reports(capsys):
    @profile_time_and_memory
    def work(n):
        return sum(range(n))

    assert work.last_report is None
    assert work(1000) == 499500
    report = work.last_report
    assert report["name"] == "work"
    assert report["seconds"] >= 0.0
    assert report["rss_delta_mb"] == report["rss_after_mb"] - report["rss_before_mb"]
    assert "Profiling report for `work`" in capsys.readouterr().out

def test_silent_decorator(capsys):
    @profile_time_and_memory(verbose=0)
    def work():
        return "done"

    assert work() == "done"
    assert work.last_report["name"] == "work"
    assert capsys.readouterr().out == ""

"""
Master runner: executes each integration suite in its own interpreter and
prints a combined table.
"""
import re
import subprocess
import sys

SUITES = [
    {"name": "Check-in Smoke", "file": "smoke_checkin.py"},
]


def parse_suite_output(stdout):
    passed = re.search(r"PASSED: (\d+)", stdout)
    total = re.search(r"TOTAL: (\d+)", stdout)
    rate = re.search(r"SUCCESS RATE: ([\d.]+)%", stdout)
    return {
        "passed": int(passed.group(1)) if passed else 0,
        "total": int(total.group(1)) if total else 0,
        "rate": float(rate.group(1)) if rate else 0.0,
    }

def run_suite(suite):
    print(f"\n{'=' * 60}")
    print(f"Running: {suite['name']}")
    print(f"{'=' * 60}\n")

    completed = subprocess.run([sys.executable, suite["file"]], capture_output=True, text=True)
    print(completed.stdout)
    if completed.stderr:
        print(completed.stderr, file=sys.stderr)

    result = parse_suite_output(completed.stdout)
    if not result["total"]:
        status = "❌"
    else:
        status = "✅" if result["rate"] == 100 else "⚠️"
    return {"name": suite["name"], "status": status, **result}

def print_summary(results):
    print("\n" + "=" * 70)
    print("📊 MASTER TEST SUMMARY - ALL SUITES")
    print("=" * 70 + "\n")
    print(f"{'Test Suite':<35} | {'Passed':>6} | {'Total':>6} | {'Rate':>7} | Status")
    print("-" * 70)

    total_passed = sum(r["passed"] for r in results)
    total_tests = sum(r["total"] for r in results)
    for r in results:
        print(f"{r['name']:<35} | {r['passed']:>6} | {r['total']:>6} | {r['rate']:>6.1f}% | {r['status']}")

    overall = total_passed / total_tests * 100 if total_tests else 0.0
    print("-" * 70)
    print(f"{'OVERALL TOTAL':<35} | {total_passed:>6} | {total_tests:>6} | {overall:>6.1f}% | {'✅' if overall == 100 else '⚠️'}")
    print("=" * 70)
    return overall

def main():
    results = [run_suite(suite) for suite in SUITES]
    overall = print_summary(results)
    return 0 if overall == 100 else 1

if __name__ == "__main__":
    sys.exit(main())

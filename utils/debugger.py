import sys
import traceback


def report_unexpected(where: str, error: BaseException):
    """
    Dump an error that no ExecutionError variant covers to stderr.

    The submitted source is never printed, only where the failure happened
    and its traceback.
    """
    out = sys.stderr
    print("\n" + "="*60, file=out)
    print(f"🔥 UNEXPECTED ERROR IN: {where}", file=out)
    print("="*60, file=out)
    print("📌 Error:", str(error), file=out)
    print("📌 TYPE:", type(error), file=out)

    frames = traceback.extract_tb(error.__traceback__)
    if frames:
        print(f"📍 TRACE LOCATION: File={frames[-1].filename}, Line={frames[-1].lineno}", file=out)

    print("\n--- FULL TRACEBACK ---", file=out)
    traceback.print_exception(type(error), error, error.__traceback__, file=out)
    print("="*60 + "\n", file=out, flush=True)

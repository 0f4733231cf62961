import sys

from paramline import BooleanParameter, NumberParameter, parse
from paramline.console import console
from paramline.render import build_tree, to_builtin

line = '-vq --output "build dir" /jobs 4 --targets [app, docs, [tests, 2]] main.py'
result = parse(line)
console.print(build_tree(result, title=line))

jobs = result.get("jobs")
if isinstance(jobs, NumberParameter):
    console.print(f"Running with {int(jobs.value)} jobs")

if result.get("v") == BooleanParameter(True):
    console.print("Targets:", to_builtin(result["targets"]))

# Arguments as passed by the shell work the same way.
if len(sys.argv) > 1:
    console.print(build_tree(parse(sys.argv[1:]), title="sys.argv"))

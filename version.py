import os
import re
import subprocess


# This line is updated automatically from the latest git tag
version = "0.1.0"

thisdir = os.path.dirname(os.path.abspath(__file__))
try:
    description = subprocess.check_output(
        "git describe --tags --abbrev=0".split(),
        stderr=subprocess.STDOUT,
        cwd=thisdir,
        universal_newlines=True).rstrip()

except (OSError, subprocess.CalledProcessError):  # not a git checkout
    pass

else:
    if re.match(r"v\d+(\.\d+)*$", description):
        version = description[1:]

#!/usr/bin/env python

# Looks for JAR files below the given directories (default: the current one)
# and prints every group of JARs that share class files.

import sys

from duplicate_classes.cli import main

sys.exit(main())

"""Shell commands exposing numframe functionalities.

This module contains the shell commands that can be used to interact with numframe.

Generate
========

``numframe-generate`` prints a dataframe of random values::

    numframe-generate -d gaussian -p 10 -p 2 -s 42 -r 5 -c height -c weight

Adding ``--describe`` also prints the descriptive statistics
of one of the columns::

    numframe-generate -d exponential -p 3 -r 1000 -c wait --describe wait --max-rows 0

"""

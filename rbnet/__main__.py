#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Demo run: a network of 20 nodes with in-degree 5, updated 1000 times.

    $ python -m rbnet
"""

from rbnet.generate import create_network


def main():
    bn = create_network(20, 5, VERBOSE=True)
    bn.run(1000)


if __name__ == '__main__':
    main()

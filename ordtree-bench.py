#!/usr/bin/env python

from ordtree.bench import main


if __name__ == '__main__':
    main()

from .bstree import BSTree, BSTreeNode, FOUND, GO_LEFT, GO_RIGHT
from .orderedtree import OrderedTree

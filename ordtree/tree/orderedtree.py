from . import bstree
from .. import log

def _data(x):
    return x.data if x is not None else None

class OrderedTree(bstree.BSTree):
    """A binary search tree over orderable values which counts the
    comparisons it performs.

    Elements need to support < and > and form a total order. Successor
    queries take and return plain values and return None if there is no
    successor."""

    def __init__(self, node_type=bstree.BSTreeNode):
        super(OrderedTree, self).__init__(node_type)
        self.compares = 0

    def _compare(self, k, x):
        self.compares += 1
        return super(OrderedTree, self)._compare(k, x)

    def insert(self, k):
        """Insert value k. Duplicates are ignored.

        Returns k
        Time complexity: O(h)"""
        new = self.node_type(data=k, nil=self.nil)
        if self.insert_node(new) is not new:
            log.debug3("ignoring duplicate value ", k)
        return k

    def inorder_next(self, k):
        x = self.find(k)
        if x is None:
            return None
        if x.right is not self.nil:
            # entering the right subtree counts as one comparison
            self.compares += 1
        return _data(self.successor(x))

    def inorder_prev(self, k):
        x = self.find(k)
        if x is None:
            return None
        return _data(self.predecessor(x))

    def preorder_next(self, k):
        x = self.find(k)
        if x is None:
            return None
        return _data(self.preorder_successor(x))

    def postorder_next(self, k):
        x = self.find(k)
        if x is None:
            return None
        return _data(self.postorder_successor(x))

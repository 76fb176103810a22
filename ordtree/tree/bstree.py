FOUND = 0
GO_LEFT = -1
GO_RIGHT = 1

class BSTreeNode(object):
    """A node of a binary search tree keyed directly on its data."""

    def __init__(self, data, nil=None):
        self.data = data

        self.left = nil
        self.right = nil
        self.parent = nil

class BSTree(object):
    """Abstract implementation of an unbalanced binary search tree.

    Absent children and the parent of the root all point to the sentinel
    node self.nil. Methods taking a node accept None in place of the
    sentinel and never return the sentinel itself."""

    def __init__(self, node_type=BSTreeNode):
        self.node_type = node_type
        self.nil = self.node_type(data=None)
        self.root = self.nil
        self.root.parent = self.nil
        self.count = 0

    def __len__(self):
        return self.count

    def __iter__(self):
        return self.inorder(self.root)

    def __contains__(self, k):
        return self.contains(k)

    def contains(self, k):
        return self.find(k) is not None

    def _node(self, x):
        return self.nil if x is None else x

    def _compare(self, k, x):
        if k < x.data:
            return GO_LEFT
        if k > x.data:
            return GO_RIGHT
        return FOUND

    def locate(self, k):
        """Walks down from the root towards k.

        Returns (x, FOUND) if x holds k, otherwise (x, GO_LEFT) or
        (x, GO_RIGHT) where x is the node a new node holding k has to be
        attached to. Returns (None, None) on an empty tree.
        Time complexity: O(h)"""
        x = self.root
        if x is self.nil:
            return (None, None)
        while True:
            direction = self._compare(k, x)
            if direction == GO_LEFT:
                if x.left is self.nil:
                    return (x, direction)
                x = x.left
            elif direction == GO_RIGHT:
                if x.right is self.nil:
                    return (x, direction)
                x = x.right
            else:
                return (x, direction)

    def find(self, k):
        """Finds the node with data k. Returns None if k is not found.

        Time complexity: O(h)"""
        x, direction = self.locate(k)
        return x if direction == FOUND else None

    def insert_node(self, new):
        """Attach node new below its locate() anchor.

        Returns new, or the node already holding equal data, in which case
        the tree is left unchanged.
        Time complexity: O(h)"""
        new.left = self.nil
        new.right = self.nil
        y, direction = self.locate(new.data)
        if direction == FOUND:
            return y
        if y is None:
            new.parent = self.nil
            self.root = new
        elif direction == GO_LEFT:
            new.parent = y
            y.left = new
        else:
            new.parent = y
            y.right = new
        self.count += 1
        return new

    def inorder(self, x):
        """Yields the data of the subtree rooted at x in inorder.

        Time complexity: O(n)
        """
        x = self._node(x)
        stack = []
        while stack or x is not self.nil:
            if x is not self.nil:
                stack.append(x)
                x = x.left
            else:
                x = stack.pop()
                yield x.data
                x = x.right

    def preorder(self, x):
        """Yields the data of the subtree rooted at x in preorder.

        Time complexity: O(n)
        """
        x = self._node(x)
        stack = [x] if x is not self.nil else []
        while stack:
            x = stack.pop()
            yield x.data
            if x.right is not self.nil:
                stack.append(x.right)
            if x.left is not self.nil:
                stack.append(x.left)

    def postorder(self, x):
        """Yields the data of the subtree rooted at x in postorder.

        Time complexity: O(n)
        """
        x = self._node(x)
        stack = []
        last = self.nil
        while stack or x is not self.nil:
            if x is not self.nil:
                stack.append(x)
                x = x.left
                continue
            top = stack[-1]
            if top.right is not self.nil and top.right is not last:
                x = top.right
            else:
                yield top.data
                last = stack.pop()

    def height(self):
        """Number of nodes on the longest path from the root to a leaf.

        Time complexity: O(n)"""
        level = [self.root] if self.root is not self.nil else []
        h = 0
        while level:
            h += 1
            level = [c for x in level for c in (x.left, x.right)
                     if c is not self.nil]
        return h

    def minimum(self, x=None):
        """Finds the node with the minimal data

        Returns None if the tree is empty
        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.left is not self.nil:
            x = x.left
        return x

    def maximum(self, x=None):
        """Finds the node with the maximum data

        Time complexity: O(h)"""
        if x is None:
            x = self.root
        if x is self.nil:
            return None

        while x.right is not self.nil:
            x = x.right
        return x

    def successor(self, x):
        """Finds the successor of node x in sorted order

        Time complexity: O(h)"""
        if x.right is not self.nil:
            return self.minimum(x.right)
        y = x.parent
        while y is not self.nil and x is y.right:
            x = y
            y = y.parent
        return y if y is not self.nil else None

    def predecessor(self, x):
        """Finds the predecessor of node x in sorted order

        Time complexity: O(h)"""
        if x.left is not self.nil:
            return self.maximum(x.left)
        y = x.parent
        while y is not self.nil and x is y.left:
            x = y
            y = y.parent
        return y if y is not self.nil else None

    def preorder_successor(self, x):
        """Finds the node visited after x in preorder

        Time complexity: O(h)"""
        if x.left is not self.nil:
            return x.left
        if x.right is not self.nil:
            return x.right
        # leaf: climb until we leave a left subtree whose parent has a
        # right subtree still to visit
        y = x.parent
        while y is not self.nil and (x is y.right or y.right is self.nil):
            x = y
            y = y.parent
        return y.right if y is not self.nil else None

    def postorder_successor(self, x):
        """Finds the node visited after x in postorder

        Time complexity: O(h)"""
        y = x.parent
        if y is self.nil:
            return None
        if x is y.right or y.right is self.nil:
            return y
        x = y.right
        while x.left is not self.nil or x.right is not self.nil:
            if x.left is not self.nil:
                x = x.left
            else:
                x = x.right
        return x

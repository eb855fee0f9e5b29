# Binary search tree of DNA profiles keyed by "Last, First".
# The tree is never rebalanced.

import logging
from collections import deque

from forensic.utils import count_occurrences


class TreeNode:
    # Tree node class
    def __init__(self, name, profile, left=None, right=None):
        self.name = name
        self.profile = profile
        self.left = left
        self.right = right

    def __repr__(self):
        return f"TreeNode({self.name!r})"


class ForensicDatabase:
    """
    Profiles of known people stored in a BST, together with the two unknown
    sequences found at the scene. Names are the keys, profiles the values.
    """

    def __init__(self, first_unknown_sequence=None, second_unknown_sequence=None):
        self.root = None
        self.first_unknown_sequence = first_unknown_sequence
        self.second_unknown_sequence = second_unknown_sequence

    def _nodes(self):
        # yields every node, preorder; uses a stack as the tree can be deep
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def insert(self, name, profile):
        # Inserts (name, profile); an existing name gets the new profile
        if self.root is None:
            self.root = TreeNode(name, profile)
            return self.root

        p_crawl = self.root
        while True:
            if name < p_crawl.name:
                if p_crawl.left is None:
                    p_crawl.left = TreeNode(name, profile)
                    return p_crawl.left
                p_crawl = p_crawl.left
            elif name > p_crawl.name:
                if p_crawl.right is None:
                    p_crawl.right = TreeNode(name, profile)
                    return p_crawl.right
                p_crawl = p_crawl.right
            else:
                logging.debug(f"Replacing profile of {name!r}")
                p_crawl.profile = profile
                return p_crawl

    def search(self, name):
        # Returns the profile stored for name or None
        p_crawl = self.root
        while p_crawl is not None:
            if name < p_crawl.name:
                p_crawl = p_crawl.left
            elif name > p_crawl.name:
                p_crawl = p_crawl.right
            else:
                return p_crawl.profile
        return None

    def __contains__(self, name):
        return self.search(name) is not None

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def names(self):
        """
        In-order list of all names, i.e. sorted
        """
        names = []
        stack = []
        node = self.root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                names.append(node.name)
                node = node.right
        return names

    def count_by_interest(self, want_interest):
        """
        Number of profiles whose interest flag equals want_interest.
        """
        return sum(1 for node in self._nodes() if node.profile.is_of_interest == want_interest)

    def flag_of_interest(self):
        """
        Marks every profile where at least half (rounded up) of its STRs occur in the
        combined unknown sequences exactly as often as the profile states. A profile
        without STRs has a threshold of 0 and is always marked. Marks are never removed.

        :return: (int) number of profiles marked by this call
        """
        combined = (self.first_unknown_sequence or '') + (self.second_unknown_sequence or '')
        newly_marked = 0

        for node in self._nodes():
            profile = node.profile
            matching = 0
            for s in profile.strs:
                if s.occurrences == count_occurrences(combined, s.repeat):
                    matching += 1

            threshold = (len(profile.strs) + 1) // 2
            if matching >= threshold and not profile.is_of_interest:
                profile.mark()
                newly_marked += 1
                logging.debug(f"{node.name!r} is of interest ({matching}/{len(profile.strs)} STRs match)")

        return newly_marked

    def get_unmarked_names(self):
        """
        Names of all unmarked profiles in level order.
        """
        unmarked = [None] * self.count_by_interest(False)
        if self.root is None:
            return unmarked

        queue = deque([self.root])
        i = 0
        while queue:
            node = queue.popleft()
            if not node.profile.is_of_interest:
                unmarked[i] = node.name
                i += 1
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

        return unmarked

    def remove_by_name(self, name):
        # Deletes the node for name; unknown names are ignored
        parent = None
        p_crawl = self.root
        while p_crawl is not None and p_crawl.name != name:
            parent = p_crawl
            p_crawl = p_crawl.left if name < p_crawl.name else p_crawl.right

        if p_crawl is None:
            return

        if p_crawl.left is not None and p_crawl.right is not None:
            # two children: take over the successor's entry, then unlink the successor
            successor_parent = p_crawl
            successor = p_crawl.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            p_crawl.name = successor.name
            p_crawl.profile = successor.profile

            # the successor has no left child
            if successor_parent is p_crawl:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return

        child = p_crawl.right if p_crawl.left is None else p_crawl.left
        if parent is None:
            self.root = child
        elif parent.left is p_crawl:
            parent.left = child
        else:
            parent.right = child

    def cleanup(self):
        """
        Removes every unmarked profile from the tree.

        :return: (list) names that were removed, in removal order
        """
        unmarked = self.get_unmarked_names()
        for name in unmarked:
            self.remove_by_name(name)
        logging.debug(f"Removed {len(unmarked)} unmarked profiles")
        return unmarked

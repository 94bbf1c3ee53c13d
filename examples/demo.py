"""Swap and concatenation example for nodechain."""

import logging

from nodechain import NodeChain


def main() -> None:
    """Build two chains, swap two cells in the first, then append the second."""
    list1 = NodeChain[str]()
    list1.add_first("BBB")
    list1.add_last("CCC")
    list1.add_last("DDD")
    list1.add_first("AAA")

    print(f"The first linked list is    {list1}")
    print("Swapping two nodes ...")
    list1.swap_nodes("CCC", "DDD")
    print(f"After swap, the new list is {list1}")

    list2 = NodeChain[str]()
    list2.add_first("111")
    list2.add_last("222")
    list2.add_last("333")
    print(f"The second linked list is   {list2}")

    print("Concatenating two lists ...")
    list1.concatenate(list2)
    print(f"The combined linked list is {list1}")
    print(f"Second list after move:     {list2}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()

"""Dynamic-programming exercises: coin change, Fibonacci and subset partition."""


def coin_change(coins, amount):
    """Fewest coins summing to ``amount`` (top-down with memo); -1 if impossible."""
    memo = {}

    def best(rest):
        if rest < 0:
            return -1
        if rest == 0:
            return 0
        if rest not in memo:
            counts = [best(rest - coin) for coin in coins]
            memo[rest] = min((c + 1 for c in counts if c != -1), default=-1)
        return memo[rest]

    return best(amount)


def coin_change2(coins, amount):
    """Fewest coins summing to ``amount`` (bottom-up table); -1 if impossible."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    unreachable = amount + 1
    table = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        table[total] = min(
            [unreachable, *(1 + table[total - coin] for coin in coins if coin <= total)]
        )
    return -1 if table[amount] == unreachable else table[amount]


def fib(n):
    """n-th Fibonacci number by plain recursion; -1 for negative n."""
    if n < 0:
        return -1
    if n < 2:
        return n
    return fib(n - 1) + fib(n - 2)


def fib1(n):
    """n-th Fibonacci number by memoised recursion; -1 for negative n."""
    if n < 0:
        return -1
    memo = {0: 0, 1: 1}

    def go(k):
        if k not in memo:
            memo[k] = go(k - 1) + go(k - 2)
        return memo[k]

    return go(n)


def fib2(n):
    """n-th Fibonacci number from a filled table; -1 for negative n."""
    if n < 0:
        return -1
    if n < 2:
        return n
    table = [0, 1]
    for _ in range(2, n + 1):
        table.append(table[-1] + table[-2])
    return table[n]


def fib3(n):
    """n-th Fibonacci number keeping only the last two terms; -1 for negative n."""
    if n < 0:
        return -1
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def can_partition(nums):
    """Tell whether ``nums`` splits into two parts with equal sums."""
    total = sum(nums)
    if total % 2:
        return False
    half = total // 2
    reachable = {0}
    for num in nums:
        reachable |= {r + num for r in reachable if r + num <= half}
    return half in reachable
"""Example usage of SETI@home WebStats client."""

import logging
import sys

from seti_webstats import InvalidAccountError, NetworkError, WebStatsClient, try_create


def main(email: str) -> None:
    """Example: Fetch and print statistics for one account."""
    logging.basicConfig(level=logging.INFO)

    with WebStatsClient(timeout=10.0) as client:
        try:
            stats = client.users.get_user_stats(email)
        except InvalidAccountError as e:
            print(f"Unknown account: {e}")
            return
        except NetworkError as e:
            print(f"Server unavailable: {e}")
            return

    print(f"Name:          {stats.name()}")
    print(f"Home page:     {stats.home_page()}")
    print(f"Results:       {stats.num_results()}")
    print(f"Last result:   {stats.last_result_time()}")
    print(f"Rank:          {stats.rank()} of {stats.total_users()}")
    print(f"Better than:   {stats.rank_percent()}% of users")
    if stats.group_name():
        print(f"Group:         {stats.group_name()} ({stats.group_url()})")

    # Everything the server sent about the user
    for key, value in stats.user_info().items():
        print(f"{key} -> {value}")

    # Error-as-value form, no try/except needed
    result = try_create("")
    print(f"Empty address: {result!r}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "foo@bar.org")

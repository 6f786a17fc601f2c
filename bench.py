import cProfile
import pstats

from ulc import Reducer
from ulc.church import SUCCESSOR, to_church


def main():
    reducer = Reducer()
    term = to_church(0)
    for i in range(30):
        term = reducer.full_reduction(SUCCESSOR(term))


if __name__ == "__main__":
    with cProfile.Profile() as profile:
        main()
        print("bench done")
        results = pstats.Stats(profile)
        results.sort_stats(pstats.SortKey.TIME)
        results.dump_stats("results.profile")

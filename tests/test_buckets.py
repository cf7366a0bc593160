import pytest

from freedompoker.buckets import (
    BalancedBucketizer,
    BucketCollection,
    BucketHand,
    ExponentialBucketizer,
)

NAMES = ["AhAs", "KhKs", "QhQs", "JhQs", "ThQs", "9hQs", "8hQs", "7hQs", "6hQs", "5hQs"]


@pytest.fixture
def ten_hands():
    return [BucketHand(name, 0) for name in NAMES]


@pytest.fixture
def collection(ten_hands):
    buckets = [ten_hands[i : i + 2] for i in range(0, 10, 2)]
    return BucketCollection(buckets)


def _many_hands(count):
    return [BucketHand(f"h{i}", i / count) for i in range(count)]


def test_bucket_hand_str():
    hand = BucketHand("AhAs", 10)
    assert hand.str() == "AhAs"
    assert hand.str(True) == "AhAs\t10.000000"
    assert str(hand) == "AhAs"


def test_bucket_hand_compares_by_equity():
    strong = BucketHand("AhAs", 0.8)
    weak = BucketHand("7h2c", 0.3)
    same = BucketHand("KhKs", 0.8)
    assert weak < strong
    assert strong > weak
    assert strong >= same and strong <= same
    assert strong == same
    assert sorted([strong, weak]) == [weak, strong]
    assert sorted([strong, weak])[0].hand == "7h2c"


def test_get_bucket_index_including_nb_hands(collection):
    assert collection.get_bucket_index_including_nb_hands(5) == 2
    assert collection.get_bucket_index_including_nb_hands(4) == 1
    assert collection.get_bucket_index_including_nb_hands(4, 1) == 2


def test_get_bucket_index_more_hands_than_available(collection):
    assert collection.get_bucket_index_including_nb_hands(100) == 4


def test_bucket_range(collection):
    assert collection.bucket_range(1, 0).nb_buckets() == 2
    assert collection.bucket_range(4, 0).nb_buckets() == 5
    assert collection.bucket_range(0, 0).nb_buckets() == 1


def test_hand_bucket_range(collection):
    assert len(collection.hand_bucket_range(1, 0)) == 4
    assert len(collection.hand_bucket_range(4, 0)) == 10
    assert len(collection.hand_bucket_range(0, 0)) == 2
    assert [h.hand for h in collection.hand_bucket_range(2, 1)] == NAMES[2:6]


def test_nb_hands_and_buckets(collection):
    assert collection.nb_hands() == 10
    assert collection.nb_buckets() == 5
    assert len(collection) == 5


def test_remove_empty_buckets(ten_hands):
    coll = BucketCollection([[], ten_hands[:2], [], [ten_hands[2]], []])
    cleaned = coll.remove_empty_buckets()
    assert cleaned.nb_buckets() == 2
    assert cleaned.nb_hands() == 3
    assert coll.nb_buckets() == 5


def test_reverse(collection):
    collection.reverse()
    assert [h.hand for h in collection[0]] == NAMES[8:10]
    assert [h.hand for h in collection[4]] == NAMES[0:2]


def test_hands_single_bucket(ten_hands):
    coll = BucketCollection([ten_hands])
    assert [h.hand for h in coll.hands()] == NAMES


def test_empty_collection_by_size():
    coll = BucketCollection(3)
    assert coll.nb_buckets() == 3
    assert coll.nb_hands() == 0
    assert coll.hands() == []


def test_balanced_more_buckets_than_hands(ten_hands):
    buckets = BalancedBucketizer().map_hands(100, ten_hands)
    assert buckets.nb_hands() == 10
    assert buckets.nb_buckets() == 100
    assert all(len(buckets[i]) == 1 for i in range(10))


def test_balanced_two_per_bucket():
    hands = _many_hands(1326)
    buckets = BalancedBucketizer().map_hands(663, hands)
    assert buckets.nb_buckets() == 663
    for bucket in buckets:
        assert len(bucket) == 2


def test_balanced_no_extra_hand():
    hands = _many_hands(1326)
    buckets = BalancedBucketizer().map_hands(20, hands)
    ran = buckets.hand_bucket_range(19, 0)
    assert len(ran) == 1326
    assert ran[-1] is hands[-1]


def test_balanced_two_buckets(ten_hands):
    buckets = BalancedBucketizer().map_hands(2, ten_hands)
    assert [h.hand for h in buckets[0]] == NAMES[:5]
    assert [h.hand for h in buckets[1]] == NAMES[5:]


def test_balanced_no_hands():
    buckets = BalancedBucketizer().map_hands(4, [])
    assert buckets.nb_buckets() == 4
    assert buckets.nb_hands() == 0


def test_exponential_keeps_all_hands():
    hands = _many_hands(1326)
    buckets = ExponentialBucketizer().map_hands(25, hands)
    assert buckets.nb_buckets() == 25
    assert sum(len(b) for b in buckets) == 1326


def test_exponential_preserves_order():
    hands = _many_hands(300)
    buckets = ExponentialBucketizer().map_hands(6, hands)
    flattened = [hand for bucket in buckets for hand in bucket]
    assert flattened == hands
    assert all(a is b for a, b in zip(flattened, hands))


def test_exponential_strongest_bucket_largest():
    hands = _many_hands(500)
    buckets = ExponentialBucketizer().map_hands(5, hands)
    sizes = [len(b) for b in buckets if b]
    assert len(buckets[-1]) == max(sizes)
    assert buckets[-1][-1] is hands[-1]
# algonotes

Short, self-contained solutions to well-known algorithm problems, plus a
small Huffman coding tool. Only the standard library is used.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.arrays` | `two_sum`, `longest_ones`, `max_area`, `unique_occurrences`, `kids_with_candies`, `longest_subarray`, `max_operations`, `largest_altitude`, `find_difference`, `equal_pairs`, `product_except_self`, `move_zeroes`, `increasing_triplet`, `can_place_flowers`, `find_max_average`, `pivot_index`, `single_number`, `min_subarray_len`, `combination_sum3` |
| `algonotes.strings` | `gcd_of_strings`, `reverse_words`, `close_strings`, `merge_alternately`, `remove_stars`, `reverse_vowels`, `is_subsequence`, `decode_string`, `compress`, `letter_combinations`, `add_binary`, `is_robot_bounded`, `max_vowels` |
| `algonotes.bits` | `min_flips`, `reverse_bits`, `divide` (32-bit semantics) |
| `algonotes.trees` | `TreeNode`, `build_tree`, `max_ancestor_diff`, `max_depth`, `max_level_sum`, `longest_zigzag`, `good_nodes`, `right_side_view`, `lowest_common_ancestor`, `lowest_common_ancestor_by_path`, `path_sum`, `delete_node`, `leaf_sequence`, `leaf_similar`, `is_full_binary_tree` |
| `algonotes.linked_lists` | `ListNode`, `from_list`, `to_list`, `next_larger_nodes`, `has_cycle`, `get_intersection_node`, `delete_middle`, `pair_sum`, `odd_even_list` |
| `algonotes.design` | `StockSpanner`, `SmallestInfiniteSet` (the numbers 1 to 1000), `RecentCounter`, `Trie` |
| `algonotes.stacks` | `asteroid_collision`, `daily_temperatures`, `predict_party_victory` |
| `algonotes.graphs` | `min_reorder`, `nearest_exit`, `calc_equation`, `find_circle_num`, `can_visit_all_rooms`, `oranges_rotting` |
| `algonotes.heaps` | `total_cost`, `max_score` |
| `algonotes.dynamic` | `tribonacci`, `longest_common_subsequence`, `rob`, `unique_paths`, `max_profit`, `min_distance`, `num_tilings`, `count_bits` |
| `algonotes.searching` | `find_peak_element`, `min_eating_speed`, `guess_number`, `binary_search`, `ternary_search` |
| `algonotes.huffman` | `HuffmanCode`, `build_huffman_code`, `main` |

Trees are built with `build_tree`, which takes a level-order list where
`None` marks a missing child. Linked lists are built with `from_list` and read
back with `to_list`. `binary_search` and `ternary_search` take an ascending
sequence and an optional inclusive `begin`/`end` range, and return the index
found or -1. Invalid input, such as an empty sequence where one is required,
raises `ValueError`.

## Examples

```python
from algonotes.strings import decode_string
from algonotes.trees import build_tree, max_depth
from algonotes.design import Trie

decode_string("3[a2[c]]")           # "accaccacc"
max_depth(build_tree([3, 9, 20, None, None, 15, 7]))  # 3

trie = Trie()
trie.insert("apple")
trie.search("apple")                # True
trie.starts_with("app")             # True
```

## Huffman coding command

`algonotes-huffman` reads a lower-case word and then up to two bit strings
from standard input, separated by whitespace. It prints the length of the word
and the number of whole bytes its encoding takes, then one `letter:code` line
per letter, from least to most frequent. It then decodes each bit string,
printing `INVALID` for one that does not decode to whole codes:

```
echo "aaabbc 00011 11" | algonotes-huffman
```

If the word is missing or contains anything other than lower-case letters, an
error is written to standard error and the exit status is 1.

The same is available from Python through `build_huffman_code(text)`, which
returns a `HuffmanCode` with `length`, `frequencies`, `codes`, `total_bits`
and `encoded_bytes`, and whose `decode(bits)` method turns a bit string back
into text (raising `ValueError` for bits that do not decode).

## What is not included

The Huffman tool is the only command; the other modules are used from Python
only. The Huffman code works on lower-case letters alone and does not encode
text to bits or read and write files.
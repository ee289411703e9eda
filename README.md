# resembla

Pure-Python building blocks for similar-sentence search. There are no
dependencies outside the standard library.

## What is in the package

- `resembla.string_util`
  - `split(text, delimiter="\t", max_parts=0)` splits text on a delimiter. A positive `max_parts` caps the number of parts, and the last part keeps the rest of the text unsplit. An empty delimiter or a negative `max_parts` raises `ValueError`.
  - `split_to_key_value_map(text, delimiter="&", kv_delimiter="=")` parses `key=value&key=value` text into a dict. It skips entries that have no `=`, and a later key overrides an earlier one.
  - The module also defines the delimiter constants `COLUMN_DELIMITER`, `ATTRIBUTE_DELIMITER`, `KEYVALUE_DELIMITER`, `VALUE_DELIMITER` and `COMMENT_PREFIX`.
- `resembla.response`
  - `ResemblaResponse(text, score)` holds a text and its score. Sorting a list of responses puts the highest score first.
  - `Word(surface, feature)` holds a surface form and its list of features.
- `resembla.measures`
  - `Measure` lists the similarity measures: `EDIT_DISTANCE`, `WEIGHTED_WORD_EDIT_DISTANCE`, `WEIGHTED_PRONUNCIATION_EDIT_DISTANCE`, `WEIGHTED_ROMAJI_EDIT_DISTANCE`, `KEYWORD_MATCH`, `ENSEMBLE` and `SVR`.
  - `SimStringMeasure` lists the set-similarity measures: `EXACT`, `DICE`, `COSINE`, `JACCARD` and `OVERLAP`.
  - `SIMSTRING_DB_FILE_COMMON_SUFFIX` and `SIMSTRING_INVERSE_FILE_COMMON_SUFFIX` are the file-name suffixes of the indexes.
- `resembla.measure_util`
  - `simstring_measure_from_string(name)` returns the matching `SimStringMeasure`.
  - `db_path_from_resembla_measure(corpus_path, measure)` and `inverse_path_from_resembla_measure(corpus_path, measure)` derive index file paths.
  - `split_to_resembla_measures(text, delimiter=",", ignore_unknown_measure=False)` parses a list of measure names.
  - Every unknown name raises `ValueError`. `split_to_resembla_measures` does not accept `ensemble` as a name.
- `resembla.predictor`
  - `PrejudicedPredictor(key="base_similarity")` returns one chosen feature from a mapping as the score. A missing key raises `KeyError`.
- `resembla.ensemble`
  - `ResemblaEnsemble(database, aggregate, max_candidate)` merges the scores of child searchers that you add with `append(resembla, weight=1.0)`.
  - `eval(query, candidates, threshold=0.0, max_response=0)` asks every child to score the candidates. It then combines each text's scores with `aggregate(weights, scores)`, drops results below `threshold` and returns the rest best first, keeping at most `max_response` of them when that is positive.
  - `find(query, threshold=0.0, max_response=0)` first takes candidates from `database.search(query, limit)`. The limit is `max(max_candidate, max_response)`, or 0 when `max_candidate` is 0.
- `resembla.with_id`
  - `ResemblaWithId(resembla, rows, id_col=1, text_col=2)` wraps a searcher so that each result is a `ResponseWithId` carrying the text's corpus id.
  - Columns are numbered from 1. A row whose `id_col` is 0 or lies past its end gets the next number after the largest id seen so far. The first id of a repeated text is kept.
  - `find` raises `KeyError` for a text that is not in the corpus. `eval` gives such texts id 0.

## Installation

```
pip install .
```

## Examples

```python
from resembla.string_util import split, split_to_key_value_map

split("a\tb\tc")                    # ['a', 'b', 'c']
split("a,b,c", ",", 2)              # ['a', 'b,c']
split_to_key_value_map("x=1&y=2")   # {'x': '1', 'y': '2'}
```

```python
from resembla.measures import Measure
from resembla.measure_util import db_path_from_resembla_measure, split_to_resembla_measures

split_to_resembla_measures("edit_distance,svr")   # [Measure.EDIT_DISTANCE, Measure.SVR]
db_path_from_resembla_measure("corpus.tsv", Measure.EDIT_DISTANCE)
# 'corpus.tsv.simstring_db.edit_distance'
```

```python
from resembla.ensemble import ResemblaEnsemble
from resembla.response import ResemblaResponse
from resembla.with_id import ResemblaWithId


class Exact:
    def eval(self, query, candidates, threshold=0.0, max_response=0):
        return [ResemblaResponse(c, 1.0 if c == query else 0.0) for c in candidates]


class Corpus:
    def __init__(self, texts):
        self.texts = texts

    def search(self, query, max_candidate):
        return self.texts[:max_candidate] if max_candidate else list(self.texts)


def weighted_mean(weights, scores):
    return sum(w * s for w, s in zip(weights, scores)) / sum(weights)


ensemble = ResemblaEnsemble(Corpus(["hello", "world"]), weighted_mean, 0)
ensemble.append(Exact(), 2.0)
ensemble.find("hello")
# [ResemblaResponse(text='hello', score=1.0), ResemblaResponse(text='world', score=0.0)]

with_id = ResemblaWithId(ensemble, [["10", "hello"], ["11", "world"]])
with_id.find("hello", threshold=0.5)
# [ResponseWithId(text='hello', score=1.0, id=10)]
```

## What the package does not do

The package has no similarity measures of its own. It has no edit distances, no keyword matching and no regression model. It also has no candidate database or index: searchers, the candidate database and the aggregate function are supplied by the caller. Nothing here reads corpus or configuration files, so `ResemblaWithId` takes rows that have already been split into columns. There is no command-line program and no server.

## Running the tests

```
pip install .[test]
pytest
```
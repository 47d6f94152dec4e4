# youvideo

Building blocks for a personal video library. The package finds video files
on disk and checksums them. It reads subtitles and looks up show information
on Bangumi. It keeps the bookkeeping for a full-text search index and talks
to a transcoding service over HTTP.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `youvideo.scanner.scan_video(library_path, exclude_dir)` walks a library
  directory in lexical order and returns the paths of video files, matched by
  name suffix (`mp4`, `mkv`, `avi`, `mov` and others). It skips hidden files,
  empty files and every directory whose name is in `exclude_dir`. It raises
  `FileNotFoundError` when `library_path` does not exist.
- `youvideo.checksum` has two functions:
  - `md5_checksum(file_path)` returns a file's hex MD5 digest.
  - `sha256_checksum(data)` returns the hex SHA-256 digest of bytes.
- `youvideo.paths` has the path helpers:
  - `get_move_path(path, source_path, target_path)` maps a path inside one
    directory to the same place inside another.
  - `check_file_exist(path)` tells whether something exists at a path.
  - `change_file_name_without_ext(filename, new_name)` keeps the extension of
    `filename` and replaces the rest of the name.
  - `copy_file(source, dest)` copies a file.
  - `is_subtitles_file(path)` is true for `.srt`, `.ass`, `.ssa` and `.vtt`.
- `youvideo.subtitles` reads captions:
  - `get_close_caption(path)` reads an SRT, VTT, ASS or SSA file, chosen by
    its extension. It returns a list of `CC` entries, each with `index`,
    `start_time`, `end_time` (as `timedelta`) and `text`, the first line of the
    caption with its markup removed.
  - `parse_srt(text)` does the same for SubRip text given as a string.
  - Unsupported extensions and malformed content raise `ValueError`.
- `youvideo.imagesize.get_image_size(stream)` decodes a GIF, JPEG or PNG image
  and returns `(width, height)`.
- `youvideo.lock.LibraryLockManager` keeps more than one job from working on
  the same library at once. It is thread-safe and has `try_to_lock`, `is_lock`
  and `unlock_library`. `DEFAULT_LIBRARY_LOCK_MANAGER` is a shared instance.
- `youvideo.bangumi` looks up shows on Bangumi:
  - `BangumiClient` has `search_subject(keyword, option)` and
    `get_subject_by_id(subject_id)`, which return the decoded JSON.
  - `BangumiInfoSource` gives `search_movie`, `search_movie_list`, `search_tv`
    and `search_tv_list` results as `SearchMovieResult` and `SearchTVResult`
    objects.
  - `BangumiInfoSource.match_entity(entity)` sets `entity.cover` and
    `entity.summary` from the best match for `entity.name`.
  - `BangumiInfoSource.subject_tags(subject)` turns a subject's tags and its
    string-valued infobox entries into `(name, value)` pairs.
- `youvideo.searchindex` holds the search index side:
  - The index definitions `VIDEOS_INDEX`, `ENTITY_INDEX` and `INDEXES`.
  - The documents `VideoDoc` and `EntityDoc`, each with `to_dict()`.
  - `find_missing_indexes(response, indexes)`.
  - `library_filter(library_id)` and `library_filters(library_ids)`.
  - `stale_document_ids(hits, current_ids)` and `hit_ids(hits)`.
- `youvideo.youtrans.YouTransClient(base_url)` talks to the transcoding
  service:
  - `create_new_task(CreateTaskRequestBody(...))` returns a `TaskResponse`.
  - `get_task_list()` returns a `TaskListResponse`.
  - `get_info()` returns an `InfoResponse`.
- `youvideo.authtoken` works with access tokens:
  - `get_token_issuer(access_token)` reads the `iss` claim of a JWT without
    verifying the signature.
  - `resolve_provider(access_token)` accepts only the `youauth` and
    `YouPlusService` issuers.
  - Both raise `InvalidTokenError`.
- `youvideo.tasktypes.TaskType` lists the kinds of background task.
  `task_type_name(task_type)` gives a kind's display name, or `""` for an
  unknown value.
- `youvideo.network.get_host_ip_list()` returns this host's non-loopback IPv4
  addresses.
- `youvideo.mapping.filter_map_key(data, can_include)` removes, in place, every
  key of a dictionary that is not allowed.

## Example

```python
from youvideo.scanner import scan_video
from youvideo.checksum import md5_checksum

for path in scan_video("/srv/videos", [".cache"]):
    print(path, md5_checksum(path))
```

## What it does not do

This is a library of parts, not a running video server. It has:

- no command-line program and no web API;
- no database, so it does not store libraries, videos, users or tags;
- no background task runner (`tasktypes` only names the kinds of task);
- no client for the search engine itself (`searchindex` only builds
  documents and filters, and works out which documents are missing or stale);
- no frame extraction or media probing for video files, and no cover image
  downloads.
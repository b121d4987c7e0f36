import json
import os


def load(filename):
    # loads the json content of a file
    # (error will be raised if file doesn't exist)
    with open(filename) as file:
        return json.load(file)


def save(filename, content=None):
    # saves the json content to a file, creating parent dirs as needed

    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filename, "w") as outfile:
        json.dump(
            content if content is not None else {},
            outfile,
            indent=2,
            sort_keys=True,
        )

    return filename

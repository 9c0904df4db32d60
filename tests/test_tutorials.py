from algokit.tutorials import TextTutorial, Tutorial, VideoTutorial


def test_video_description():
    video = VideoTutorial("Django tutorial", 4.89, 4.56)
    assert video.describe() == (
        "this is an amazing video with title Django tutorial\n"
        "Ratings: 4.89 out of 5 stars\n"
        "length of this video is: 4.56 minutes\n"
    )


def test_text_tutorial_keeps_plain_description():
    text = TextTutorial("Django tutorial Text", 4.19, 433)
    assert text.describe() == ""
    assert text.words == 433


def test_plain_tutorial_has_no_description():
    assert Tutorial("Intro", 3.0).describe() == ""


def test_descriptions_through_base_type():
    tutorials: list[Tutorial] = [
        VideoTutorial("Django tutorial", 4.89, 4.56),
        TextTutorial("Django tutorial Text", 4.19, 433),
    ]
    described = [tutorial.describe() for tutorial in tutorials]
    assert described[0].startswith("this is an amazing video with title Django tutorial")
    assert described[1] == ""


def test_video_lines_carry_fields():
    video = VideoTutorial("Flask", 5, 12)
    lines = video.describe().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith("Flask")
    assert "5 out of 5 stars" in lines[1]
    assert "12 minutes" in lines[2]
"""
Apps Script skeletons, one per ScriptKind.

Values are substituted with jinja2's `tojson` filter so every parameter
lands in the script as a JS literal.
"""

from typing import Dict
from jinja2 import Template

from slidenotes.models import ScriptKind

EXTRACT_TEMPLATE = r"""
function getSpeakerNotes() {
  try {
    const presentationId = {{ presentation_id|tojson }};
    const presentation = SlidesApp.openById(presentationId);
    const slides = presentation.getSlides();
    const allNotes = [];
    const emptySlides = [];

    slides.forEach((slide, index) => {
      const notes = slide.getNotesPage().getSpeakerNotesShape().getText().asString();
      if (!notes.trim()) {
        emptySlides.push(index + 1);
      }
      allNotes.push(notes.trim());
    });

    const output = allNotes.join({{ separator|tojson }});
    Logger.log(output);

    // SlidesApp has no modal dialog, so the notes go in a sidebar
    const escaped = output
      .replace(/&/g, '&amp;')
      .replace(/</g, '&lt;')
      .replace(/\n/g, '&#10;');
    let htmlContent = '<h3>Speaker notes to copy:</h3>' +
                        '<textarea style="width: 95%; height: 80vh;" readonly>' +
                        escaped +
                        '</textarea>' +
                        '<p>Copy the text above, go back to the previous tab and paste it.</p>';
    if (emptySlides.length > 0) {
      htmlContent += '<p><b>Warning:</b> slide(s) ' + emptySlides.join(', ') +
                     ' have no speaker notes. Empty slides are skipped when the notes are formatted, ' +
                     'so later slides shift up. Add a placeholder note to these slides before ' +
                     'writing revised notes back, or the notes will land on the wrong slides.</p>';
    }

    const html = HtmlService.createHtmlOutput(htmlContent)
      .setTitle('Speaker Notes');

    SlidesApp.getUi().showSidebar(html);

  } catch (e) {
    Logger.log('Error: ' + e.toString());
    SlidesApp.getUi().alert('An error occurred. Check that the presentation ID is correct and that you have access to it.');
  }
}
"""

BULK_UPDATE_TEMPLATE = r"""
function updateSpeakerNotes() {
  try {
    const presentationId = {{ presentation_id|tojson }};
    const notes = {{ notes|tojson }};
    const fontFamily = {{ font_family|tojson }};
    const fontSize = {{ font_size|tojson }};

    const presentation = SlidesApp.openById(presentationId);
    const slides = presentation.getSlides();
    const count = Math.min(slides.length, notes.length);

    for (let i = 0; i < count; i++) {
      const text = slides[i].getNotesPage().getSpeakerNotesShape().getText();
      text.setText(notes[i]);
      const style = text.getTextStyle();
      if (fontFamily) {
        style.setFontFamily(fontFamily);
      }
      if (fontSize) {
        style.setFontSize(fontSize);
      }
    }

    let message = 'Updated speaker notes on ' + count + ' slide(s).';
    if (slides.length > notes.length) {
      message += ' ' + (slides.length - notes.length) + ' slide(s) had no matching notes and were left unchanged.';
    }
    if (notes.length > slides.length) {
      message += ' ' + (notes.length - slides.length) + ' note segment(s) had no matching slide and were skipped.';
    }
    message += ' Notes are written in slide order. Slides that had no notes when extracted were skipped, so check that each note is on the right slide.';
    Logger.log(message);
    SlidesApp.getUi().alert(message);

  } catch (e) {
    Logger.log('Error: ' + e.toString());
    SlidesApp.getUi().alert('An error occurred. Check that the presentation ID is correct and that you have edit access to it.');
  }
}
"""

CLEAR_TEMPLATE = r"""
function clearSpeakerNotes() {
  try {
    const presentationId = {{ presentation_id|tojson }};
    const presentation = SlidesApp.openById(presentationId);
    const slides = presentation.getSlides();

    slides.forEach((slide) => {
      slide.getNotesPage().getSpeakerNotesShape().getText().clear();
    });

    const message = 'Cleared speaker notes on ' + slides.length + ' slide(s).';
    Logger.log(message);
    SlidesApp.getUi().alert(message);

  } catch (e) {
    Logger.log('Error: ' + e.toString());
    SlidesApp.getUi().alert('An error occurred. Check that the presentation ID is correct and that you have edit access to it.');
  }
}
"""

TEMPLATES: Dict[ScriptKind, Template] = {
    ScriptKind.EXTRACT: Template(EXTRACT_TEMPLATE),
    ScriptKind.BULK_UPDATE: Template(BULK_UPDATE_TEMPLATE),
    ScriptKind.CLEAR: Template(CLEAR_TEMPLATE),
}

import os

from django.test import TestCase

from duocore.apps.entries.exceptions import (
    DuplicateProof,
    IncompleteSubmission,
    MissingProof,
    PayloadTooLarge,
    UnsupportedMediaType,
)
from duocore.apps.entries.models import Entry
from duocore.apps.entries.services.hashing import fingerprint_file
from duocore.apps.entries.services.intake import IntakePipeline, declared_mime

from .utils import TempMediaMixin, form_payload, proof_file


class IntakePipelineTest(TempMediaMixin, TestCase):
    def proof_dir(self):
        return os.path.join(self.media_root, "comprovantes")

    def stored_files(self):
        if not os.path.isdir(self.proof_dir()):
            return []
        return sorted(os.listdir(self.proof_dir()))

    def test_successful_submission(self):
        entry_id = IntakePipeline().submit(form_payload(), proof_file())

        entry = Entry.objects.get(pk=entry_id)
        self.assertEqual(entry.status, Entry.STATUS_PENDING)
        self.assertEqual(entry.athlete1_name, "Ana Souza")
        self.assertEqual(entry.athlete2_city, "Rio de Janeiro")
        self.assertEqual(entry.duo_category, "Elite")
        self.assertTrue(entry.consent)
        self.assertEqual(entry.uniforms, "m feminino / p feminino")
        self.assertEqual(entry.validation_score, 100)
        self.assertEqual(entry.payment_proof_mime, "application/pdf")
        self.assertEqual(entry.validation_mime, "application/pdf")
        self.assertIsNotNone(entry.submitted_at)

        # Nombre generado con la extensión original en minúsculas
        self.assertTrue(entry.payment_proof.endswith(".pdf"))
        self.assertNotIn("comprovante", entry.payment_proof)
        self.assertEqual(entry.payment_proof_url, f"/uploads/comprovantes/{entry.payment_proof}")
        self.assertEqual(self.stored_files(), [entry.payment_proof])

        with open(os.path.join(self.proof_dir(), entry.payment_proof), "rb") as fp:
            self.assertEqual(entry.proof_fingerprint, fingerprint_file(fp))

    def test_missing_file(self):
        with self.assertRaises(MissingProof):
            IntakePipeline().submit(form_payload(), None)
        self.assertEqual(Entry.objects.count(), 0)

    def test_unsupported_mime_is_rejected_before_persisting(self):
        upload = proof_file(b"GIF89a", name="prova.gif", content_type="image/gif")
        with self.assertRaises(UnsupportedMediaType):
            IntakePipeline().submit(form_payload(), upload)
        self.assertEqual(self.stored_files(), [])
        self.assertEqual(Entry.objects.count(), 0)

    def test_payload_too_large(self):
        upload = proof_file(b"x" * 11, name="big.png", content_type="image/png")
        with self.assertRaises(PayloadTooLarge):
            IntakePipeline(max_bytes=10).submit(form_payload(), upload)
        self.assertEqual(self.stored_files(), [])

    def test_default_size_cap_is_5_mib(self):
        self.assertEqual(IntakePipeline().max_bytes, 5 * 1024 * 1024)

    def test_category_required(self):
        with self.assertRaises(IncompleteSubmission):
            IntakePipeline().submit(form_payload(**{"entry.666666666": "   "}), proof_file())
        self.assertEqual(self.stored_files(), [])
        self.assertEqual(Entry.objects.count(), 0)

    def test_duplicate_content_under_other_name(self):
        first = IntakePipeline().submit(form_payload(), proof_file(b"same-bytes", name="a.pdf"))

        with self.assertRaises(DuplicateProof):
            IntakePipeline().submit(
                form_payload(**{"entry.111111111": "Outra dupla"}),
                proof_file(b"same-bytes", name="b.PDF"),
            )

        self.assertEqual(list(Entry.objects.values_list("pk", flat=True)), [first])
        # El segundo archivo queda en disco aunque no se cree fila
        self.assertEqual(len(self.stored_files()), 2)

    def test_different_content_creates_two_entries(self):
        IntakePipeline().submit(form_payload(), proof_file(b"one"))
        IntakePipeline().submit(form_payload(), proof_file(b"two"))
        self.assertEqual(Entry.objects.count(), 2)

    def test_score_without_consent(self):
        payload = form_payload(acceptTerms=None)
        entry_id = IntakePipeline().submit(payload, proof_file(content_type="image/webp", name="x.webp"))
        entry = Entry.objects.get(pk=entry_id)
        self.assertFalse(entry.consent)
        self.assertEqual(entry.validation_score, 80)


class DeclaredMimeTest(TestCase):
    def test_parameters_are_ignored(self):
        upload = proof_file(content_type="Application/PDF; charset=binary")
        self.assertEqual(declared_mime(upload), "application/pdf")
